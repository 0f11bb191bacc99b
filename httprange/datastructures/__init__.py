from .range import ByteRange as ByteRange
from .range import ContentRangeSpec as ContentRangeSpec
from .range import Satisfied as Satisfied
from .range import Unsatisfied as Unsatisfied
from .headers import EnvironHeaders as EnvironHeaders
from .headers import Headers as Headers
from .typed import ContentRangeHeader as ContentRangeHeader
from .typed import RangeHeader as RangeHeader
from .typed import TypedHeader as TypedHeader
from .typed import get_typed_header as get_typed_header
from .typed import iter_typed_headers as iter_typed_headers
from .typed import register_typed_header as register_typed_header
