import json
from typing import Any

import wandb


def init_reporting(project: str, name: str | None, config: dict[str, Any], enabled: bool) -> None:
    if not enabled:
        return
    wandb.init(project=project, name=name)
    wandb.config.update(config)


def report_metrics(metrics: dict[str, float], step: int | None = None) -> None:
    print(json.dumps(metrics, indent=2))
    if wandb.run is not None:
        wandb.log(metrics, step=step)


def finish_reporting() -> None:
    if wandb.run is not None:
        wandb.finish()
