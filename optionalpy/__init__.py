from .optional import Optional, EMPTY
from .errors import NoValuePresentError
