"""httprange -- RFC 7233 ``Range`` and ``Content-Range`` header values

Contents:

* http -- parse and dump the two header values

* datastructures -- ByteRange, Satisfied, Unsatisfied, typed Headers

* exceptions -- malformed header errors, 400 and 416 HTTP exceptions

* sansio -- request and response objects exposing the parsed headers

"""
from .http import dump_content_range_header as dump_content_range_header
from .http import dump_range_header as dump_range_header
from .http import parse_byte_range as parse_byte_range
from .http import parse_content_range_header as parse_content_range_header
from .http import parse_content_range_spec as parse_content_range_spec
from .http import parse_range_header as parse_range_header
from .datastructures import ByteRange as ByteRange
from .datastructures import ContentRangeSpec as ContentRangeSpec
from .datastructures import Headers as Headers
from .datastructures import Satisfied as Satisfied
from .datastructures import Unsatisfied as Unsatisfied
from .exceptions import MalformedHeader as MalformedHeader
from .exceptions import RequestedRangeNotSatisfiable as RequestedRangeNotSatisfiable
