import aws_cdk as core
import aws_cdk.assertions as assertions
import pytest

from token_authorizer.token_authorizer_stack import TokenAuthorizerStack


def _template(context=None):
    app = core.App(context=context)
    stack = TokenAuthorizerStack(app, "token-authorizer")
    return assertions.Template.from_stack(stack)


def test_authorizer_lambda_created():
    template = _template()

    template.has_resource_properties("AWS::Lambda::Function", {
        "Handler": "lambda_function.lambda_handler",
        "Runtime": "python3.11",
        "Environment": {
            "Variables": assertions.Match.object_like({"POWERTOOLS_SERVICE_NAME": "token-authorizer"}),
        },
    })


def test_token_authorizer_created():
    template = _template()

    template.has_resource_properties("AWS::ApiGateway::Authorizer", {
        "Type": "TOKEN",
        "IdentitySource": "method.request.header.Authorization",
        "AuthorizerResultTtlInSeconds": 300,
    })


def test_authorizer_ttl_from_context():
    template = _template({"authorizer_ttl_seconds": 60})

    template.has_resource_properties("AWS::ApiGateway::Authorizer", {
        "AuthorizerResultTtlInSeconds": 60,
    })


def test_authorizer_caching_can_be_disabled():
    template = _template({"authorizer_ttl_seconds": 0})

    template.has_resource_properties("AWS::ApiGateway::Authorizer", {
        "AuthorizerResultTtlInSeconds": 0,
    })


@pytest.mark.parametrize("ttl", [-1, 3601])
def test_authorizer_ttl_out_of_range(ttl):
    with pytest.raises(ValueError, match="authorizer_ttl_seconds"):
        _template({"authorizer_ttl_seconds": ttl})


def test_stage_name_from_context():
    template = _template({"stage_name": "prod"})

    template.has_resource_properties("AWS::ApiGateway::Stage", {
        "StageName": "prod",
    })


def test_pets_methods_use_authorizer():
    template = _template()

    template.resource_count_is("AWS::ApiGateway::Method", 4)
    template.all_resources_properties("AWS::ApiGateway::Method", {
        "AuthorizationType": "CUSTOM",
    })
