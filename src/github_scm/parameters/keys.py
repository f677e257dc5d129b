"""Parameter and configuration keys of the GitHub SCM service."""

from __future__ import annotations

KEY = "service:scm:github"

PARAMETER_REPOSITORY = f"{KEY}:repository"
PARAMETER_USER = f"{KEY}:user"
PARAMETER_AUTH_KEY = f"{KEY}:auth-key"

CONF_API_URL = f"{KEY}:api-url"
DEFAULT_API_URL = "https://api.github.com/"

# Validation codes
CODE_REPOSITORY = "github-repository"
CODE_REQUIRED = "NotNull"
