"""Loading request parameters from JSON or YAML files."""

from pathlib import Path
from typing import Any

import yaml

from shippo_client.errors.formatter import ShippoClientError


def load_params(path: str) -> dict[str, Any]:
    """Read a parameters file containing one mapping.

    JSON files parse as YAML, so one loader handles both.

    Raises:
        ShippoClientError: E-2003 if the file is missing, unparseable, or
            not a mapping.
    """
    file_path = Path(path)
    try:
        data = yaml.safe_load(file_path.read_text())
    except OSError as e:
        raise ShippoClientError.from_code("E-2003", path=path, reason=e.strerror) from e
    except yaml.YAMLError as e:
        raise ShippoClientError.from_code("E-2003", path=path, reason="invalid syntax") from e
    if not isinstance(data, dict):
        raise ShippoClientError.from_code(
            "E-2003", path=path, reason="top level is not a mapping"
        )
    return data
