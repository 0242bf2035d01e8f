"""Loading contract creation bytecode from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union


def _decode_hex(value: str, source: Path) -> bytes:
    value = value.strip()
    if value.startswith(("0x", "0X")):
        value = value[2:]
    if not value:
        raise ValueError(f"No bytecode in {source}")
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise ValueError(f"Invalid bytecode hex in {source}: {e}") from e


def load_bytecode(path: Union[str, Path]) -> bytes:
    """Read creation bytecode from a hex file or a compiler artifact.

    Artifacts may carry ``bytecode`` either as a hex string (Hardhat) or as
    ``{"object": "0x..."}`` (Foundry).
    """
    path = Path(path)
    text = path.read_text()

    if path.suffix != ".json":
        return _decode_hex(text, path)

    artifact = json.loads(text)
    bytecode = artifact.get("bytecode") if isinstance(artifact, dict) else None
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object")
    if not isinstance(bytecode, str):
        raise ValueError(f"Artifact {path} has no bytecode field")
    return _decode_hex(bytecode, path)
