from .gamma_util import is_gamma_pole
from .gammasgn import gammasgn
from .poch import poch
