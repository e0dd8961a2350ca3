"""General utility helper functions."""

import re
from typing import Any, Dict


def camel_to_snake(name: str) -> str:
    """
    Convert camelCase string to snake_case.

    Args:
        name: The camelCase string to convert

    Returns:
        The snake_case version of the string

    Examples:
        >>> camel_to_snake("candidateName")
        'candidate_name'
        >>> camel_to_snake("jobTitle")
        'job_title'
    """
    name = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', name).lower()


def snake_case_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a shallow copy of `data` with camelCase keys converted."""
    return {camel_to_snake(k): v for k, v in data.items()}
