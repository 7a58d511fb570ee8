import os

from aws_cdk import (
    aws_lambda as lambda_,
    Stack,
    Duration,
    aws_apigateway as apigw,
    aws_iam as iam,
)
from constructs import Construct

from token_authorizer.resources.pets.pets import PetsResources

AUTH_SRC = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "src", "auth")

POWERTOOLS_LAYER_ARN = "arn:aws:lambda:{region}:017000801446:layer:AWSLambdaPowertoolsPythonV3-python311-x86_64:7"

DEFAULT_AUTHORIZER_TTL_SECONDS = 300
MAX_AUTHORIZER_TTL_SECONDS = 3600
DEFAULT_STAGE_NAME = "dev"

class TokenAuthorizerStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        ttl_seconds = self.node.try_get_context("authorizer_ttl_seconds")
        ttl_seconds = DEFAULT_AUTHORIZER_TTL_SECONDS if ttl_seconds is None else int(ttl_seconds)
        if not 0 <= ttl_seconds <= MAX_AUTHORIZER_TTL_SECONDS:
            raise ValueError(f"authorizer_ttl_seconds must be between 0 and {MAX_AUTHORIZER_TTL_SECONDS}, got {ttl_seconds}")
        stage_name = self.node.try_get_context("stage_name") or DEFAULT_STAGE_NAME

        powertools_layer = lambda_.LayerVersion.from_layer_version_arn(self, "PowertoolsLayer",
                                                                       POWERTOOLS_LAYER_ARN.format(region=self.region))

        basic_lambda_statement = iam.PolicyStatement(
                actions=["logs:CreateLogGroup", "logs:CreateLogStream", "logs:PutLogEvents"],
                resources=["arn:aws:logs:*:*:*"],
                effect=iam.Effect.ALLOW,
            )

        auth_policy = iam.PolicyDocument(statements=[basic_lambda_statement])
        lambda_role = iam.Role(self, "LambdaRole", assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"), 
                               inline_policies={"auth_policy": auth_policy})
        auth_lambda = lambda_.Function(self, "AuthLambda", runtime=lambda_.Runtime.PYTHON_3_11, code=lambda_.Code.from_asset(AUTH_SRC), 
                                       handler="lambda_function.lambda_handler", role=lambda_role, layers=[powertools_layer],
                                       environment={"POWERTOOLS_SERVICE_NAME": "token-authorizer", "POWERTOOLS_LOG_LEVEL": "INFO"})

        api = apigw.RestApi(self, "TokenAuthorizerApi", rest_api_name="TokenAuthorizer API", deploy_options=apigw.StageOptions(stage_name=stage_name))
        authorizer = apigw.TokenAuthorizer(self, "TokenAuthorizer", handler=auth_lambda,
                                           identity_source=apigw.IdentitySource.header("Authorization"),
                                           results_cache_ttl=Duration.seconds(ttl_seconds))

        self.pets = PetsResources(self, "PetsResources", authorizer, api)
