"""Airlock.create argument assembly."""

from .bytecode import load_bytecode
from .create_params import build_create_params, encode_governance_factory_data, validate_deployment

__all__ = [
    "load_bytecode",
    "build_create_params",
    "encode_governance_factory_data",
    "validate_deployment",
]
