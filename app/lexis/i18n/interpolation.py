"""Variable interpolation for message templates.

Placeholders use the %{name} syntax. %%{name} is an escape that renders
the literal text %{name}. Any other use of %, { or } is left untouched.

Only the two percent signs directly before "{" take part in the escape;
any earlier ones are literal text. So "%%%{name}" renders "%%{name}" and
needs no variable. There is no way to put a literal "%" directly before
a substituted value.
"""

import re
from typing import Any, List, Mapping, Optional

from lexis.i18n.errors import MissingVariableError

PLACEHOLDER = re.compile(r"(%?)%\{([A-Za-z_][A-Za-z0-9_]*)\}")


def placeholders(template: str) -> List[str]:
    """List the variable names a template requires.

    Args:
        template: Message template.

    Returns:
        Unique names in order of first appearance, escaped ones excluded.
    """
    names: List[str] = []
    for escape, name in PLACEHOLDER.findall(template):
        if not escape and name not in names:
            names.append(name)
    return names


def interpolate(template: str, variables: Optional[Mapping[str, Any]] = None) -> str:
    """Replace every %{name} in the template with its variable.

    All required variables are checked before any replacement so a
    partially substituted string is never produced.

    Args:
        template: Message template with %{variable} placeholders.
        variables: Variable name -> value. Values are rendered with str().
            Variables without a matching placeholder are ignored.

    Returns:
        Message with variables interpolated.

    Raises:
        MissingVariableError: If a placeholder has no value in variables.
    """
    variables = variables or {}

    for name in placeholders(template):
        if name not in variables:
            raise MissingVariableError(name)

    def _substitute(match: "re.Match[str]") -> str:
        escape, name = match.groups()
        if escape:
            return f"%{{{name}}}"
        return str(variables[name])

    return PLACEHOLDER.sub(_substitute, template)
