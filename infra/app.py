#!/usr/bin/env python3
import os
import aws_cdk as cdk
from config import ENVIRONMENTS, get_environment_config
from stacks.bootstrap_stack import BootstrapStack
from stacks.echo_api_stack import EchoApiStack

app = cdk.App()

project_name = app.node.try_get_context("projectName") or "python-lambda-cookbook"
environment = app.node.try_get_context("environment") or "dev"
github_repository = app.node.try_get_context("githubRepository") or "example-org/python-lambda-cookbook"

env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION", "us-east-1"),
)

BootstrapStack(
    app,
    f"{project_name}-bootstrap",
    project_name=project_name,
    github_repository=github_repository,
    environments=list(ENVIRONMENTS),
    env=env,
)

EchoApiStack(
    app,
    f"{project_name}-{environment}",
    project_name=project_name,
    config=get_environment_config(environment),
    env=env,
)

cdk.Tags.of(app).add("Project", project_name)
cdk.Tags.of(app).add("ManagedBy", "cdk")

app.synth()
