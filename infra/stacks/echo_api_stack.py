# infra/stacks/echo_api_stack.py

from pathlib import Path

from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    CfnOutput,
    aws_lambda as _lambda,
    aws_apigateway as apigw,
    aws_logs as logs,
)
from constructs import Construct

from config import EnvironmentConfig, resource_prefix

HANDLER_DIR = Path(__file__).resolve().parents[2] / "backend" / "handler"

# Published by AWS in every commercial region under this account
POWERTOOLS_LAYER_ACCOUNT = "017000801446"
POWERTOOLS_LAYER_VERSION = 7

RETENTION = {
    7: logs.RetentionDays.ONE_WEEK,
    14: logs.RetentionDays.TWO_WEEKS,
    30: logs.RetentionDays.ONE_MONTH,
    90: logs.RetentionDays.THREE_MONTHS,
}


class EchoApiStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        project_name: str,
        config: EnvironmentConfig,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        prefix = resource_prefix(project_name, config.name)
        if config.log_retention_days not in RETENTION:
            raise ValueError(f"Unsupported log retention: {config.log_retention_days} days")

        removal_policy = RemovalPolicy.RETAIN if config.removal_policy_retain else RemovalPolicy.DESTROY

        # =========
        # Logging
        # =========
        log_group = logs.LogGroup(
            self,
            "FunctionLogGroup",
            log_group_name=f"/aws/lambda/{prefix}",
            retention=RETENTION[config.log_retention_days],
            removal_policy=removal_policy,
        )

        # ===============
        # Lambda (echo)
        # ===============
        layer_version = self.node.try_get_context("powertoolsLayerVersion") or POWERTOOLS_LAYER_VERSION
        powertools = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            f"arn:aws:lambda:{self.region}:{POWERTOOLS_LAYER_ACCOUNT}:layer:"
            f"AWSLambdaPowertoolsPythonV3-python312-arm64:{layer_version}",
        )

        self.function = _lambda.Function(
            self,
            "EchoFunction",
            function_name=prefix,
            runtime=_lambda.Runtime.PYTHON_3_12,
            architecture=_lambda.Architecture.ARM_64,
            handler="echo.handler",
            code=_lambda.Code.from_asset(str(HANDLER_DIR), exclude=["__pycache__"]),
            memory_size=config.memory_size,
            timeout=Duration.seconds(config.timeout_seconds),
            layers=[powertools],
            log_group=log_group,
            environment={
                "ENVIRONMENT": config.name,
                "LOG_LEVEL": config.log_level,
                "POWERTOOLS_SERVICE_NAME": "echo-api",
            },
        )

        # ===================================
        # API Gateway (catch-all ANY proxy)
        # ===================================
        self.api = apigw.LambdaRestApi(
            self,
            "Api",
            rest_api_name=prefix,
            description=f"Echo API ({config.name})",
            handler=self.function,
            proxy=True,  # ANY on / and on /{proxy+}
            deploy_options=apigw.StageOptions(
                stage_name=config.name,
                throttling_rate_limit=config.throttling_rate_limit,
                throttling_burst_limit=config.throttling_burst_limit,
            ),
        )

        # =======
        # Outputs
        # =======
        CfnOutput(self, "ApiUrl", value=self.api.url)
        CfnOutput(self, "FunctionName", value=self.function.function_name)
        CfnOutput(self, "FunctionArn", value=self.function.function_arn)
