import logging

__version__ = "0.1.0"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(module)s]: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
# Third-party clients log every request at INFO
for name in ("httpx", "openai", "git"):
    logging.getLogger(name).setLevel(logging.WARNING)
