from .i0 import i0, i0e
