#!/usr/bin/env python3
import aws_cdk as cdk

from token_authorizer.token_authorizer_stack import TokenAuthorizerStack


app = cdk.App()
TokenAuthorizerStack(app, "TokenAuthorizerStack")

app.synth()
