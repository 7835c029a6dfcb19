"""svcgen - compile service definitions into launchd and systemd files."""

import logging

# Silent unless the application calls svcgen.logging_config.setup_logging()
logging.getLogger("svcgen").addHandler(logging.NullHandler())
