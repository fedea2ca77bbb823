"""
stepseq - pure arrangement model and beat codec for a step sequencer.
"""
__version__ = "0.1.0"
