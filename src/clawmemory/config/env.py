"""``${NAME}`` interpolation for secret values."""

import os
import re
from typing import Mapping, Optional

from .errors import MissingEnvVarError

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def resolve_env_vars(value: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Replace every ``${NAME}`` in ``value`` with the variable's value.

    Single pass: substituted text is not scanned again, and there is no
    escape syntax. An empty variable counts as unset.

    Args:
        value: String possibly containing placeholders.
        environ: Variable lookup; defaults to ``os.environ``.

    Raises:
        MissingEnvVarError: If a referenced variable is unset or empty.
    """
    env = os.environ if environ is None else environ

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        env_value = env.get(name)
        if not env_value:
            raise MissingEnvVarError(name)
        return env_value

    return _ENV_VAR_PATTERN.sub(_substitute, value)
