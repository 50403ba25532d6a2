from .errors import LoaderError
from .file_spec import VariablesFileSpec
from .variables_loader import load_variables

__all__ = ["load_variables", "VariablesFileSpec", "LoaderError"]
