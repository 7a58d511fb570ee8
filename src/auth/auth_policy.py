from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

POLICY_VERSION = '2012-10-17'
EXECUTE_API_INVOKE = 'execute-api:Invoke'


class Effect(str, Enum):
    ALLOW = 'Allow'
    DENY = 'Deny'


class Method(str, Enum):
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'
    PATCH = 'PATCH'
    HEAD = 'HEAD'
    OPTIONS = 'OPTIONS'
    ALL = '*'


class ConditionKey(str, Enum):
    CURRENT_TIME = 'aws:CurrentTime'
    EPOCH_TIME = 'aws:EpochTime'
    MULTI_FACTOR_AUTH_AGE = 'aws:MultiFactorAuthAge'
    MULTI_FACTOR_AUTH_PRESENT = 'aws:MultiFactorAuthPresent'
    PRINCIPAL_TYPE = 'aws:PrincipalType'
    REFERER = 'aws:Referer'
    SECURE_TRANSPORT = 'aws:SecureTransport'
    SOURCE_ARN = 'aws:SourceArn'
    SOURCE_IP = 'aws:SourceIp'
    SOURCE_VPC = 'aws:SourceVpc'
    SOURCE_VPCE = 'aws:SourceVpce'
    TOKEN_ISSUE_TIME = 'aws:TokenIssueTime'
    USER_AGENT = 'aws:UserAgent'
    USERID = 'aws:userid'
    USERNAME = 'aws:username'


def _name(value):
    return value.value if isinstance(value, Enum) else str(value)


def _freeze(value):
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value):
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def _freeze_conditions(conditions):
    if not conditions:
        return None
    return tuple((_name(operator), tuple((_name(key), _freeze(value)) for key, value in keys.items()))
                 for operator, keys in conditions.items())


@dataclass(frozen=True)
class Statement:
    effect: Effect
    resources: Tuple[str, ...]
    # ((operator, ((condition_key, value), ...)), ...) with list values frozen to tuples
    conditions: Optional[Tuple[Tuple[str, Tuple[Tuple[str, Any], ...]], ...]] = None
    actions: Tuple[str, ...] = field(default=(EXECUTE_API_INVOKE,), init=False)

    def to_dict(self):
        statement = {
            'Action': list(self.actions),
            'Effect': self.effect.value,
            'Resource': list(self.resources),
        }
        if self.conditions:
            statement['Condition'] = {operator: {key: _thaw(value) for key, value in keys}
                                      for operator, keys in self.conditions}
        return statement


@dataclass(frozen=True)
class PolicyDocument:
    statements: Tuple[Statement, ...] = ()
    version: str = field(default=POLICY_VERSION, init=False)

    def to_dict(self):
        return {
            'Version': self.version,
            'Statement': [statement.to_dict() for statement in self.statements],
        }


@dataclass(frozen=True)
class PolicyBuilder:
    """
    Accumulates execute-api:Invoke grants for one API stage.

    Every grant returns a new builder with one more statement, so calls chain:

        policy = PolicyBuilder(region, account_id, api_id, stage) \\
            .allow_method(Method.GET, "/pets") \\
            .deny_method(Method.DELETE, "/pets/*") \\
            .build()

    Statements keep the order the grants were made in and are never merged.
    """
    region: str
    account_id: str
    api_id: str
    stage: str
    statements: Tuple[Statement, ...] = field(default=(), repr=False)

    def __post_init__(self):
        for name in ('region', 'account_id', 'api_id', 'stage'):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")

    def resource_arn(self, method: Method, resource_path: str) -> str:
        if resource_path.startswith('/'):
            resource_path = resource_path[1:]
        return (f"arn:aws:execute-api:{self.region}:{self.account_id}:"
                f"{self.api_id}/{self.stage}/{method.value}/{resource_path}")

    def add_method(self, effect: Effect, method: Method, resource_path: str,
                   conditions: Optional[Mapping[str, Mapping[str, Any]]] = None) -> "PolicyBuilder":
        statement = Statement(effect=Effect(effect), resources=(self.resource_arn(Method(method), resource_path),),
                              conditions=_freeze_conditions(conditions))
        return replace(self, statements=self.statements + (statement,))

    def allow_all_methods(self):
        return self.add_method(Effect.ALLOW, Method.ALL, '*')

    def deny_all_methods(self):
        return self.add_method(Effect.DENY, Method.ALL, '*')

    def allow_method(self, method, resource_path):
        return self.add_method(Effect.ALLOW, method, resource_path)

    def deny_method(self, method, resource_path):
        return self.add_method(Effect.DENY, method, resource_path)

    def allow_method_with_conditions(self, method, resource_path, conditions):
        return self.add_method(Effect.ALLOW, method, resource_path, conditions)

    def deny_method_with_conditions(self, method, resource_path, conditions):
        return self.add_method(Effect.DENY, method, resource_path, conditions)

    def build(self) -> PolicyDocument:
        return PolicyDocument(statements=self.statements)


@dataclass(frozen=True)
class AuthorizerResponse:
    principal_id: str
    policy_document: PolicyDocument
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for key, value in self.context.items():
            if not isinstance(value, (str, int, float, bool)):
                raise TypeError(f"context value for {key!r} must be a string, number or boolean, "
                                f"got {type(value).__name__}")
        object.__setattr__(self, 'context', dict(self.context))

    def to_dict(self):
        return {
            'principalId': self.principal_id,
            'policyDocument': self.policy_document.to_dict(),
            'context': dict(self.context),
        }
