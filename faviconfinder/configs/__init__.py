"""Configuration for faviconfinder"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for faviconfinder settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
    Validator("http.request_timeout_sec", is_type_of=float, gt=0),
    Validator("http.connect_timeout_sec", is_type_of=float, gt=0),
    Validator("http.pool_timeout_sec", is_type_of=float, gt=0),
    Validator("http.max_connections", is_type_of=int, gte=1),
    Validator("http.follow_redirects", is_type_of=bool),
    Validator("http.user_agent", is_type_of=str, must_exist=True),
    # Only lenient parsers are accepted: documents without an explicit <head>
    # still need their head-level tags grouped under one.
    Validator("finder.parser", is_in=["lxml", "html.parser"]),
    Validator("finder.log_enabled", is_type_of=bool),
]

# `root_path` = The directory holding this module, so the settings files are found
#               regardless of the working directory.
# `envvar_prefix` = Export envvars with `export FAVICONFINDER_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export FAVICONFINDER_ENV=production`.
#                  Default: `development`.
# `merge_enabled` = Environment tables only override the keys they set.
# `validators` = Define validators for faviconfinder settings.

settings = Dynaconf(
    root_path=str(Path(__file__).parent),
    envvar_prefix="FAVICONFINDER",
    settings_files=[
        "default.toml",
        "development.toml",
        "production.toml",
        "testing.toml",
    ],
    environments=True,
    env_switcher="FAVICONFINDER_ENV",
    merge_enabled=True,
    validators=_validators,
)
