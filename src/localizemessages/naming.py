"""Member-name helpers for error messages.

Errors name the members they apply to (see ValidationResult.member_names).
Front ends often expect those names in PascalCase even when the Python
parameter is lowercase.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["camel_to_pascal", "snake_to_pascal"]


def camel_to_pascal(name: str) -> str:
    """Upper-case the first character of a camelCase name.

    Example:
        >>> camel_to_pascal("month")
        'Month'
        >>> camel_to_pascal("dateOfBirth")
        'DateOfBirth'
    """
    return name[:1].upper() + name[1:]


def snake_to_pascal(name: str) -> str:
    """Convert a snake_case name to PascalCase.

    Example:
        >>> snake_to_pascal("date_of_birth")
        'DateOfBirth'
    """
    return "".join(camel_to_pascal(part) for part in name.split("_"))
