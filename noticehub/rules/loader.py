from pathlib import Path

import yaml
from pydantic import ValidationError

from noticehub.rules.models import Rules

DEFAULT_RULES_PATH = Path(__file__).resolve().parents[2] / "rules.yaml"


def load_rules(path: Path = DEFAULT_RULES_PATH) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    # Rules may be kept inside a markdown ```yaml fence
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    clean_content = "\n".join(yaml_lines) if found_block else content

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def default_rules() -> Rules:
    """Rules used when no rules file is available: the stock demo setup."""
    return Rules.model_validate(
        {
            "rbac": {"roles": {"teacher": ["notices:*", "users:manage"], "student": []}},
            "seed": {
                "accounts": [
                    {
                        "role": "teacher",
                        "name": "Demo Teacher",
                        "email": "teacher@demo.com",
                        "password": "123456",
                    },
                    {
                        "role": "student",
                        "name": "Demo Student",
                        "email": "student@demo.com",
                        "password": "123456",
                    },
                ],
                "notice": {
                    "title": "Welcome to NoticeHub",
                    "body": "This is a sample published notice. Teacher can publish/unpublish.",
                },
            },
        }
    )
