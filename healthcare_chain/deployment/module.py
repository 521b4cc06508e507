"""
Declarative deployment modules.

A module is a named, ordered list of steps recorded by a builder callback:

    module = build_module("Token", lambda m: {"token": m.contract("Token", [1000])})

Steps are executed later by ContractDeployer in declaration order.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from healthcare_chain.core.exceptions import DeploymentError


@dataclass(frozen=True)
class LibraryStep:
    """Deploy a linkable library."""

    future_id: str
    contract_name: str


@dataclass(frozen=True)
class ContractStep:
    """Deploy a contract, optionally linking previously declared libraries."""

    future_id: str
    contract_name: str
    args: List[Any] = field(default_factory=list)
    # fully qualified name ("contracts/x/Lib.sol:Lib") -> library step
    libraries: Dict[str, LibraryStep] = field(default_factory=dict)


Step = Union[LibraryStep, ContractStep]


@dataclass
class DeploymentModule:
    module_id: str
    steps: List[Step]
    results: Dict[str, Step]


class ModuleBuilder:
    """Records steps for one module. Passed to the builder callback as `m`."""

    def __init__(self, module_id: str):
        self.module_id = module_id
        self.steps: List[Step] = []

    def _future_id(self, name: str, id: Optional[str]) -> str:
        future_id = f"{self.module_id}#{id or name}"
        if any(step.future_id == future_id for step in self.steps):
            raise DeploymentError(
                f"Duplicate step id: {future_id}",
                details={"module_id": self.module_id},
            )
        return future_id

    def library(self, name: str, id: Optional[str] = None) -> LibraryStep:
        step = LibraryStep(future_id=self._future_id(name, id), contract_name=name)
        self.steps.append(step)
        return step

    def contract(
        self,
        name: str,
        args: Optional[List[Any]] = None,
        libraries: Optional[Dict[str, LibraryStep]] = None,
        id: Optional[str] = None,
    ) -> ContractStep:
        libraries = libraries or {}
        for fqn, library in libraries.items():
            if library not in self.steps:
                raise DeploymentError(
                    f"Library {fqn} is not declared in module {self.module_id}",
                    details={"contract_name": name},
                )
        step = ContractStep(
            future_id=self._future_id(name, id),
            contract_name=name,
            args=list(args or []),
            libraries=dict(libraries),
        )
        self.steps.append(step)
        return step


def build_module(
    module_id: str, builder: Callable[[ModuleBuilder], Dict[str, Step]]
) -> DeploymentModule:
    """
    Build a deployment module.

    Args:
        module_id: Module name
        builder: Callback declaring steps on the ModuleBuilder and returning
            the named results

    Returns:
        DeploymentModule: The recorded module
    """
    m = ModuleBuilder(module_id)
    results = builder(m) or {}
    return DeploymentModule(module_id=module_id, steps=list(m.steps), results=results)
