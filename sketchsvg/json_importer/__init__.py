from .process_f360 import Fusion360ReconstructionParser

__all__ = ["Fusion360ReconstructionParser"]
