"""Sample runners for democode."""

from .interface_sample import InterfaceSample
from .property_sample import PropertySample
from .nullable_sample import NullableSample
from .lambda_sample import LambdaSample

# Table-driven dispatch
SAMPLE_HANDLERS = {
    'interface': InterfaceSample,
    'property': PropertySample,
    'nullable': NullableSample,
    'lambda': LambdaSample,
}

__all__ = [
    'SAMPLE_HANDLERS',
    'InterfaceSample',
    'PropertySample',
    'NullableSample',
    'LambdaSample',
]
