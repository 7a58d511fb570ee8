from dataclasses import dataclass
from typing import Optional


class MalformedArn(ValueError):
    pass


@dataclass(frozen=True)
class MethodArn:
    """
    The method ARN API Gateway sends with every authorizer call, in the shape
    arn:aws:execute-api:{region}:{account_id}:{api_id}/{stage}/{method}/{resource_path}
    """
    region: str
    account_id: str
    api_id: str
    stage: str
    method: Optional[str] = None
    resource_path: Optional[str] = None

    @classmethod
    def parse(cls, value):
        if not isinstance(value, str):
            raise MalformedArn(f"method ARN must be a string, got {type(value).__name__}")

        parts = value.split(':', 5)
        if len(parts) < 6:
            raise MalformedArn(f"expected 6 colon-separated segments in {value!r}")

        api_parts = parts[5].split('/')
        if len(api_parts) < 2:
            raise MalformedArn(f"expected api id and stage in {value!r}")

        region, account_id = parts[3], parts[4]
        api_id, stage = api_parts[0], api_parts[1]
        if not all([region, account_id, api_id, stage]):
            raise MalformedArn(f"empty region, account, api id or stage in {value!r}")
        # only the resource path may carry colons
        if ':' in api_id or ':' in stage:
            raise MalformedArn(f"unexpected colon in api id or stage in {value!r}")

        method = api_parts[2] if len(api_parts) > 2 else None
        resource_path = '/'.join(api_parts[3:]) if len(api_parts) > 3 else None

        return cls(region, account_id, api_id, stage, method, resource_path)

    def __str__(self):
        arn = f"arn:aws:execute-api:{self.region}:{self.account_id}:{self.api_id}/{self.stage}"
        if self.method is not None:
            arn += f"/{self.method}"
            if self.resource_path is not None:
                arn += f"/{self.resource_path}"
        return arn
