# infra/config.py

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class EnvironmentConfig:
    name: str
    log_level: str = "INFO"
    memory_size: int = 128
    timeout_seconds: int = 10
    log_retention_days: int = 7
    throttling_rate_limit: int = 50
    throttling_burst_limit: int = 100
    removal_policy_retain: bool = False  # keep log groups when the stack goes away


ENVIRONMENTS: Dict[str, EnvironmentConfig] = {
    "dev": EnvironmentConfig(name="dev", log_level="DEBUG"),
    "staging": EnvironmentConfig(name="staging", log_retention_days=14),
    "prod": EnvironmentConfig(
        name="prod",
        log_level="WARN",
        memory_size=256,
        log_retention_days=30,
        throttling_rate_limit=500,
        throttling_burst_limit=1000,
        removal_policy_retain=True,
    ),
}


def get_environment_config(name: str) -> EnvironmentConfig:
    try:
        return ENVIRONMENTS[name]
    except KeyError:
        valid = ", ".join(sorted(ENVIRONMENTS))
        raise ValueError(f"Unknown environment '{name}', expected one of: {valid}") from None


def resource_prefix(project_name: str, environment: str) -> str:
    return f"{project_name}-{environment}"
