"""Value types modelled on the Roblox engine datatypes: integer vectors, colors, sequences, UI dimensions, physical properties and enums."""

__version__ = "0.1.0"