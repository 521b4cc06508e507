"""
Deployment module for the HealthcareRecordSystem contract.
"""

from healthcare_chain.deployment.module import DeploymentModule, build_module

MODULE_ID = "HealthcareRecordSystem"

HEALTHCARE_LIBRARIES = [
    "PatientsLib",
    "DoctorsLib",
    "RecordsLib",
    "AppointmentsLib",
]


def library_fqn(name: str) -> str:
    """Fully qualified source name of a library under contracts/modules."""
    return f"contracts/modules/{name}.sol:{name}"


def healthcare_module(link_libraries: bool = False) -> DeploymentModule:
    """
    Declare the HealthcareRecordSystem deployment.

    Args:
        link_libraries: Also deploy the record-system libraries and link them
            into the main contract

    Returns:
        DeploymentModule with a single "healthcare" result
    """

    def _build(m):
        libraries = {}
        if link_libraries:
            # Step 1: Deploy Libraries
            for name in HEALTHCARE_LIBRARIES:
                libraries[library_fqn(name)] = m.library(name)

        # Step 2: Deploy Main Contract with Linked Libraries
        healthcare = m.contract("HealthcareRecordSystem", [], libraries=libraries)

        return {"healthcare": healthcare}

    return build_module(MODULE_ID, _build)
