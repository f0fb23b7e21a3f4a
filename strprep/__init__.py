"""
RFC 3454 string preparation (stringprep) with the SASLprep, Nameprep,
Nodeprep, Resourceprep, iSCSI and trace profiles.

    registry = ProfileRegistry()
    saslprep = registry.get_instance(ProfileId.SASLPREP)
    saslprep.prepare("I\u00adX")
"""

from .const import BidiCategory
from .const import BidiViolation
from .const import MappingKind
from .const import ProfileId
from .engine import StringPrep
from .errors import BidiViolationError
from .errors import is_error
from .errors import MalformedInputError
from .errors import ProhibitedCharacterError
from .errors import StringPrepError
from .errors import UnassignedCodepointError
from .mapping import MappingTable
from .profiles import Profile
from .ranges import RangeTable
from .registry import ProfileRegistry
from .structs import PrepResult

__version__ = "1.0.0"
