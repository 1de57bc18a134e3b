# infra/stacks/bootstrap_stack.py

from typing import Sequence

from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    CfnOutput,
    aws_iam as iam,
    aws_s3 as s3,
)
from constructs import Construct

GITHUB_OIDC_URL = "https://token.actions.githubusercontent.com"
GITHUB_OIDC_HOST = "token.actions.githubusercontent.com"
STS_AUDIENCE = "sts.amazonaws.com"


class BootstrapStack(Stack):
    """
    One-time account setup for CI/CD: GitHub OIDC trust, a state bucket,
    and one deploy role per environment. Deployed by hand, before any pipeline runs.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        project_name: str,
        github_repository: str,
        environments: Sequence[str],
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        if "/" not in github_repository:
            raise ValueError(f"github_repository must look like 'owner/repo', got '{github_repository}'")

        # =============
        # OIDC (GitHub)
        # =============
        provider = iam.CfnOIDCProvider(
            self,
            "GitHubOidcProvider",
            url=GITHUB_OIDC_URL,
            client_id_list=[STS_AUDIENCE],
        )

        # ==============
        # State bucket
        # ==============
        state_bucket = s3.Bucket(
            self,
            "StateBucket",
            versioned=True,
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            removal_policy=RemovalPolicy.RETAIN,  # state outlives the stack
        )

        # ==========================
        # Deploy roles (per env)
        # ==========================
        self.deploy_roles = {}
        for env_name in environments:
            role = iam.Role(
                self,
                f"DeployRole{env_name.capitalize()}",
                role_name=f"{project_name}-github-{env_name}",
                description=f"GitHub Actions deploy role for {project_name} ({env_name})",
                max_session_duration=Duration.hours(1),
                assumed_by=iam.WebIdentityPrincipal(
                    provider.attr_arn,
                    conditions={
                        "StringEquals": {f"{GITHUB_OIDC_HOST}:aud": STS_AUDIENCE},
                        "StringLike": {
                            f"{GITHUB_OIDC_HOST}:sub": f"repo:{github_repository}:environment:{env_name}"
                        },
                    },
                ),
            )
            # CDK deployments go through the roles created by `cdk bootstrap`
            role.add_to_policy(
                iam.PolicyStatement(
                    sid="AssumeCdkBootstrapRoles",
                    actions=["sts:AssumeRole"],
                    resources=[f"arn:{self.partition}:iam::{self.account}:role/cdk-*"],
                )
            )
            state_bucket.grant_read_write(role)
            self.deploy_roles[env_name] = role

            CfnOutput(self, f"DeployRoleArn{env_name.capitalize()}", value=role.role_arn)

        self.state_bucket = state_bucket
        self.oidc_provider = provider

        # =======
        # Outputs
        # =======
        CfnOutput(self, "StateBucketName", value=state_bucket.bucket_name)
        CfnOutput(self, "OidcProviderArn", value=provider.attr_arn)
