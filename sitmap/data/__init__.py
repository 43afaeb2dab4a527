"""
Data package for sitmap.
Loads reference geometry and analytical results.
"""

from sitmap.data.loaders import DataService, create_sample_results, get_data_service

__all__ = [
    "DataService",
    "create_sample_results",
    "get_data_service",
]
