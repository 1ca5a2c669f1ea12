from fastkst.core.dto.io.civil_time import CivilTimeDTO, ConversionResultDTO

__all__ = ["CivilTimeDTO", "ConversionResultDTO"]
