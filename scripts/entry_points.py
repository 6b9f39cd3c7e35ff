"""Entry point functions for the localesync command line tool."""

import os
import sys
import logging

# Add the parent directory to the sys path so that modules can be found
base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(base_path)


def localesync():
    """Entry point for the localesync command."""
    from scripts.localesync_common import InitLogger, CreateArgParser, CreateOptions, CreateSynchroniser
    from PyLocaleSync.Helpers.Localization import initialize_localization
    from PyLocaleSync.LocaleSynchroniser import LocaleSynchroniser
    from PyLocaleSync.LocaleSyncError import LocaleSyncError
    from PyLocaleSync.Options import Options
    from PyLocaleSync.SyncSummary import SyncSummary

    parser = CreateArgParser("Finds translation keys used in code, adds them to the base catalog and translates any missing messages")
    args = parser.parse_args()

    InitLogger("localesync", args.debug)

    initialize_localization(os.getenv("LOCALESYNC_UI_LANGUAGE"))

    try:
        options : Options = CreateOptions(args)

        synchroniser : LocaleSynchroniser = CreateSynchroniser(options)

        summary : SyncSummary = synchroniser.Synchronise()

        for line in summary.FormatSummary().split('\n'):
            logging.info(line)

    except (LocaleSyncError, OSError) as e:
        logging.error(str(e))
        sys.exit(1)

    except KeyboardInterrupt:
        logging.warning("Interrupted, catalogs that were not saved are unchanged")
        sys.exit(1)

    sys.exit(summary.exit_code)
