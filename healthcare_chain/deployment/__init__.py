"""
Deployment modules for HealthcareRecordSystem contracts.
"""

from .healthcare import healthcare_module
from .module import ContractStep, DeploymentModule, LibraryStep, build_module

__all__ = [
    "build_module",
    "healthcare_module",
    "ContractStep",
    "DeploymentModule",
    "LibraryStep",
]
