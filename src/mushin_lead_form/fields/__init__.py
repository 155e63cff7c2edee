"""Field components that feed normalized values into the form controller."""

from .base import FormField, Option
from .phone import PhoneInput
from .address import AddressData, AddressAutocomplete
from .text import TextInput
from .select import SelectField
from .options import PROPERTY_CONDITION_OPTIONS, TIMEFRAME_OPTIONS, REFERRAL_SOURCE_OPTIONS

__all__ = [
    'FormField',
    'Option',
    'PhoneInput',
    'AddressData',
    'AddressAutocomplete',
    'TextInput',
    'SelectField',
    'PROPERTY_CONDITION_OPTIONS',
    'TIMEFRAME_OPTIONS',
    'REFERRAL_SOURCE_OPTIONS',
]
