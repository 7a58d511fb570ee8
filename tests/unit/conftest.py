from dataclasses import dataclass

import pytest


@pytest.fixture
def lambda_context():
    @dataclass
    class LambdaContext:
        function_name: str = "token-authorizer"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:token-authorizer"
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()


@pytest.fixture
def method_arn():
    return "arn:aws:execute-api:us-east-1:123456789012:abcdef/prod/GET/pets/42"
