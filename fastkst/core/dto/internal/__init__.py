from fastkst.core.dto.internal.civil_time import TM_YEAR_BIAS, CivilTime, TmBuffer

__all__ = ["TM_YEAR_BIAS", "CivilTime", "TmBuffer"]
