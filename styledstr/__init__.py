__version__ = "0.1.0"


from . import extras as extras
from ._fmt import ColorChoice as ColorChoice
from ._fmt import Colorizer as Colorizer
from ._fmt import Stream as Stream
from ._settings import options as options
from ._strings import TextSpan as TextSpan
from ._strings import strip_ansi_sequences as strip_ansi_sequences
from ._styled_str import OutputError as OutputError
from ._styled_str import StyledStr as StyledStr
from ._styles import DEFAULT_STYLES as DEFAULT_STYLES
from ._styles import PLAIN_STYLES as PLAIN_STYLES
from ._styles import Style as Style
from ._styles import StyleRole as StyleRole
from ._styles import Styles as Styles
from ._warnings import StyledStrWarning as StyledStrWarning
from ._width import display_width as display_width
