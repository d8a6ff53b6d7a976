"""croncat-cli: query CronCat contract state through a Juno node client."""

__version__ = "0.1.0"
