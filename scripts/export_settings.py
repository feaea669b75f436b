"""Export environment-variable metadata for every settings class as JSON.

Usage:
    python scripts/export_settings.py [OUTPUT_PATH]

Without OUTPUT_PATH the JSON document is written to stdout.
"""

import json
import sys
from pathlib import Path
from typing import Any, get_args

from pydantic_core import PydanticUndefined
from pydantic_settings import BaseSettings

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from infrastructure.settings import LoggingSettings, Settings  # noqa: E402


def _type_name(annotation: Any) -> str:
    choices = get_args(annotation)
    if choices and all(isinstance(choice, str) for choice in choices):
        return " | ".join(choices)
    return getattr(annotation, "__name__", str(annotation))


def get_model_metadata(settings_class: type[BaseSettings]) -> dict[str, Any]:
    prefix = settings_class.model_config.get("env_prefix", "")
    properties = []

    for name, field_info in settings_class.model_fields.items():
        default = field_info.get_default(call_default_factory=True)
        is_required = default is PydanticUndefined

        if is_required or default is None:
            display_default = None
        elif isinstance(default, (bool, int, float, list, dict)):
            display_default = default
        else:
            display_default = str(default)

        properties.append(
            {
                "env_var": f"{prefix}{name.upper()}",
                "type": _type_name(field_info.annotation),
                "default": display_default,
                "required": is_required,
                "description": field_info.description or "",
            }
        )

    return {
        "class_name": settings_class.__name__,
        "prefix": prefix,
        "doc": settings_class.__doc__ or "",
        "properties": properties,
    }


def export_settings(output_path: Path | None = None) -> dict[str, Any]:
    data = {cls.__name__: get_model_metadata(cls) for cls in (Settings, LoggingSettings)}
    document = json.dumps(data, indent=2)

    if output_path is None:
        print(document)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document + "\n")
        print(f"Exported settings to {output_path}", file=sys.stderr)

    return data


if __name__ == "__main__":
    export_settings(Path(sys.argv[1]) if len(sys.argv) > 1 else None)
