"""CLI interface for the HealthcareRecordSystem tooling."""

import json
import sys
from argparse import ArgumentParser
from typing import List, Optional

from healthcare_chain.core.config import settings
from healthcare_chain.core.exceptions import HealthcareChainError, InvalidInputError
from healthcare_chain.core.logging import log_error, setup_logging
from healthcare_chain.domain.models.selector import SelectorMatch
from healthcare_chain.infrastructure.blockchain.selectors import (
    KNOWN_ERROR_SIGNATURES,
    find_match,
    selector_from_revert_data,
    selector_of,
)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_INVALID_INPUT = 2
EXIT_FAILURE = 3


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="healthcare-chain",
        description="HealthcareRecordSystem error selectors and deployment",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    find = commands.add_parser(
        "find-selector", help="Find the error signature behind a selector"
    )
    target = find.add_mutually_exclusive_group()
    target.add_argument(
        "--target", help=f"4-byte selector (default: {settings.TARGET_SELECTOR})"
    )
    target.add_argument("--revert-data", help="Raw 0x-prefixed revert data")
    find.add_argument(
        "--signature",
        action="append",
        dest="signatures",
        help="Candidate error signature, repeatable (default: configured list)",
    )
    find.add_argument(
        "--known-errors",
        action="store_true",
        help="Search every known HealthcareRecordSystem and OpenZeppelin error",
    )

    selector = commands.add_parser("selector", help="Print the selector of a signature")
    selector.add_argument("signature")

    commands.add_parser("show-config", help="Print the toolchain configuration")

    deploy = commands.add_parser("deploy", help="Deploy HealthcareRecordSystem")
    deploy.add_argument("--network", help=f"Network (default: {settings.DEFAULT_NETWORK})")
    deploy.add_argument(
        "--link-libraries",
        action="store_true",
        help="Deploy and link the record-system libraries",
    )
    deploy.add_argument("--artifacts", help="Artifacts directory")

    return parser


def _find_selector(args) -> int:
    if args.revert_data:
        target = selector_from_revert_data(args.revert_data)
    else:
        target = args.target or settings.TARGET_SELECTOR
    if args.known_errors:
        signatures = KNOWN_ERROR_SIGNATURES
    else:
        signatures = args.signatures or settings.ERROR_SIGNATURES

    result = find_match(signatures, target)
    if isinstance(result, SelectorMatch):
        print(f"Match -> {result.signature} ({result.selector})")
        return EXIT_OK

    print(f"No match for {result.target} among {result.scanned} signatures")
    return EXIT_NO_MATCH


def _deploy(args) -> int:
    from healthcare_chain.deployment import healthcare_module
    from healthcare_chain.infrastructure.blockchain.contract_deployer import (
        ContractDeployer,
    )

    network = settings.get_network_config(args.network)
    deployer = ContractDeployer(network, artifacts_dir=args.artifacts)
    module = healthcare_module(link_libraries=args.link_libraries)
    deployed = deployer.deploy_module(module)

    for future_id, address in deployed.items():
        print(f"{future_id} - {address}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging()

    try:
        if args.command == "find-selector":
            return _find_selector(args)
        if args.command == "selector":
            print(selector_of(args.signature))
            return EXIT_OK
        if args.command == "show-config":
            print(json.dumps(settings.get_toolchain_config(), indent=2))
            return EXIT_OK
        return _deploy(args)
    except InvalidInputError as e:
        print(f"Invalid input: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except HealthcareChainError as e:
        log_error(e, context={"command": args.command, **e.details})
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
