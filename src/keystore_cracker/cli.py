"""
Command-line entry point:

    keystore-cracker wallet.json password_config.md --workers 8
    keystore-cracker --init-config password_config.md
"""
from __future__ import annotations

import argparse
from logging import getLogger

from keystore_cracker.config import PACKAGE_LOGGER, parse_args, setup_logger
from keystore_cracker.cracker.engine import RecoveryEngine
from keystore_cracker.errors import ConfigurationError, KeystoreError
from keystore_cracker.models.models import RecoveryResult
from keystore_cracker.utils.config_loader import create_sample_config, load_config
from keystore_cracker.utils.output_utils import save_recovered_password
from keystore_cracker.validators import VALIDATORS

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

BANNER_WIDTH = 60


def run(args: argparse.Namespace) -> int:
    logger = setup_logger(PACKAGE_LOGGER, log_level=args.log_level)

    if args.init_config is not None:
        create_sample_config(args.init_config)
        logger.info(f"Edit '{args.init_config}' and run again.")
        return EXIT_OK

    logger.info("=" * BANNER_WIDTH)
    logger.info("ETHEREUM KEYSTORE PASSWORD RECOVERY")
    logger.info("=" * BANNER_WIDTH)

    try:
        config = load_config(args.config)
        validator = VALIDATORS["keystore"](args.keystore)
        logger.info(validator.description)

        engine = RecoveryEngine(validator, progress_interval=args.progress_interval)
        result = engine.recover(config, args.workers, timeout=args.timeout)
    except FileNotFoundError as e:
        logger.error(f"{e} (create one with --init-config)")
        return EXIT_ERROR
    except (ConfigurationError, KeystoreError) as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.warning("Recovery interrupted by user")
        return EXIT_INTERRUPTED

    return report_result(args, result)


def report_result(args: argparse.Namespace, result: RecoveryResult) -> int:
    logger = getLogger(PACKAGE_LOGGER)

    if not result.found:
        reason = "Search timed out" if result.timed_out else "Password not found"
        logger.info(f"{reason} after {result.attempts:,} attempts "
                    f"({result.elapsed_seconds:.2f} seconds)")
        return EXIT_NOT_FOUND

    logger.info("=" * BANNER_WIDTH)
    logger.info("WALLET RECOVERED SUCCESSFULLY!")
    logger.info("=" * BANNER_WIDTH)
    logger.info(f"Total attempts: {result.attempts:,} | "
                f"Time elapsed: {result.elapsed_seconds:.2f} seconds")

    if args.show_password:
        print(f"Password: {result.password}")
    if args.save:
        save_recovered_password(result.password, args.keystore, args.output)
    if not (args.show_password or args.save):
        logger.info("Use --show-password or --save to reveal the password")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
