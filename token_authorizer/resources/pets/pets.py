import json

from aws_cdk import aws_apigateway as apigw
from constructs import Construct

class PetsResources(Construct):
    """
    Sample endpoints guarded by the token authorizer. They answer from mock
    integrations so the stack deploys without any backend.
    """
    def __init__(self, scope: Construct, construct_id: str, authorizer: apigw.TokenAuthorizer, gateway: apigw.RestApi, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        pets_resource = gateway.root.add_resource("pets")
        pet_resource = pets_resource.add_resource("{petId}")

        pets_resource.add_method("GET", self.mock_integration({"pets": []}), authorizer=authorizer,
                                 method_responses=[apigw.MethodResponse(status_code="200")])
        pets_resource.add_method("POST", self.mock_integration({"created": True}), authorizer=authorizer,
                                 method_responses=[apigw.MethodResponse(status_code="200")])
        pet_resource.add_method("GET", self.mock_integration({"pet": "$input.params('petId')"}), authorizer=authorizer,
                                method_responses=[apigw.MethodResponse(status_code="200")])
        pet_resource.add_method("DELETE", self.mock_integration({"deleted": "$input.params('petId')"}), authorizer=authorizer,
                                method_responses=[apigw.MethodResponse(status_code="200")])

    def mock_integration(self, body):
        return apigw.MockIntegration(
            request_templates={"application/json": json.dumps({"statusCode": 200})},
            integration_responses=[apigw.IntegrationResponse(
                status_code="200",
                response_templates={"application/json": json.dumps(body)},
            )],
        )
