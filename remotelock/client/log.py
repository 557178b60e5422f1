# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import logging

logger = logging.getLogger("remotelock")
logger.addHandler(logging.NullHandler())


def configure_logging(level=logging.INFO, fmt: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"):
    """Attach a stream handler to the remotelock logger.

    Library code never calls this; applications that want lock diagnostics
    on stderr call it once at start-up.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
