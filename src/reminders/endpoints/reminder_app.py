#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging

import hydra
from omegaconf import DictConfig, OmegaConf

from reminders import __version__
from reminders.constants import APP_CONFIG_MODULE, APP_CONFIG_NAME
from reminders.interactive.session import ReminderSession

logger = logging.getLogger(__name__)


@hydra.main(
    version_base=None,
    config_name=APP_CONFIG_NAME,
    config_path=f"pkg://{APP_CONFIG_MODULE}",
)
def run(cfg: DictConfig):
    logger.info(f"Reminders version: {__version__}")
    if cfg.debug:
        logger.info(OmegaConf.to_yaml(cfg, resolve=True))
    session = ReminderSession(cfg)
    session.start()


if __name__ == "__main__":
    run()
