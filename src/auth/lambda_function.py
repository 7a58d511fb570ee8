from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from auth_policy import AuthorizerResponse, Method, PolicyBuilder
from method_arn import MalformedArn, MethodArn
from token_validator import Unauthorized, validate_token

logger = Logger()

# Surfaced to integrations as $context.authorizer.<key>; cached with the policy.
CONTEXT_ATTRIBUTES = {
    'stringKey': 'stringval',
    'numberKey': 123,
    'booleanKey': True,
}


def authorize(token, method_arn) -> AuthorizerResponse:
    grant = validate_token(token)

    try:
        arn = MethodArn.parse(method_arn)
    except MalformedArn as e:
        logger.warning(f"Rejecting request with malformed method ARN: {e}")
        raise Unauthorized() from e

    # The policy is cached by the gateway (TTL set on the authorizer) and is
    # applied to later calls to any method of the API made with the same
    # token, so the grant covers the whole stage instead of this one method.
    policy = PolicyBuilder(arn.region, arn.account_id, arn.api_id, arn.stage) \
        .add_method(grant.effect, Method.ALL, '*') \
        .build()

    return AuthorizerResponse(grant.principal_id, policy, CONTEXT_ATTRIBUTES)


@logger.inject_lambda_context
def lambda_handler(event, context: LambdaContext):
    token = event.get('authorizationToken')
    method_arn = event.get('methodArn')
    logger.info(f"Client token: {token}")
    logger.info(f"Method ARN: {method_arn}")

    try:
        response = authorize(token, method_arn)
    except Unauthorized:
        logger.info("Request is unauthorized")
        raise

    auth_response = response.to_dict()
    logger.info("Policy generated", extra={"principal_id": response.principal_id,
                                           "policy_document": auth_response['policyDocument']})
    return auth_response
