"""HTTP Basic authentication in front of CloudFront via Lambda@Edge."""

import json
from dataclasses import dataclass

from aws_cdk import Annotations
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

UNAUTHORIZED_BODY = "You are not authorized to enter"

_HANDLER_BODY = """
const basicAuthentication = 'Basic ' + Buffer.from(user + ':' + pass).toString('base64');

exports.handler = async (event, context, callback) => {
  const request = event.Records[0].cf.request;
  const headers = request.headers;

  if (typeof headers.authorization == 'undefined' || headers.authorization[0].value != basicAuthentication) {
    const response = {
      status: '401',
      statusDescription: 'Unauthorized',
      body: %s,
      headers: {
        'www-authenticate': [{key: 'WWW-Authenticate', value: 'Basic'}]
      },
    };
    callback(null, response);
    return;
  }
  callback(null, request);
};
""" % json.dumps(UNAUTHORIZED_BODY)


@dataclass(frozen=True)
class BasicAuthCredentials:
  """Username and password viewers must present."""

  username: str
  password: str

  def __repr__(self) -> str:
    return f"BasicAuthCredentials(username={self.username!r}, password='***')"


def render_handler_code(credentials: BasicAuthCredentials) -> str:
  """Build the viewer-request handler source with the credentials inlined.

  Values are written as JSON string literals so quotes or backslashes in a
  password stay inside the literal.
  """
  return (
    f"const user = {json.dumps(credentials.username)};\n"
    f"const pass = {json.dumps(credentials.password)};\n" + _HANDLER_BODY
  )


class BasicAuthEdgeFunction(Construct):
  """Lambda@Edge function gating every viewer request behind Basic auth.

  The credentials are baked into the deployed function code, so rotating
  them means redeploying the function. A synth warning records this.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    credentials: BasicAuthCredentials,
    runtime: lambda_.Runtime = lambda_.Runtime.NODEJS_14_X,
  ) -> None:
    super().__init__(scope, id)

    self.function = cloudfront.experimental.EdgeFunction(
      self,
      "BasicAuthLambda",
      handler="index.handler",
      runtime=runtime,
      code=lambda_.Code.from_inline(render_handler_code(credentials)),
    )

    self.edge_lambda = cloudfront.EdgeLambda(
      function_version=self.function.current_version,
      event_type=cloudfront.LambdaEdgeEventType.VIEWER_REQUEST,
    )

    Annotations.of(self).add_warning_v2(
      "static-website:basic-auth-inline-credentials",
      "Basic auth credentials are embedded in plaintext in the Lambda@Edge "
      "code; rotating them requires redeploying the function.",
    )
