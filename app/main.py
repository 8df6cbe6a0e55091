import signal
import sys
import threading

from dotenv import load_dotenv

from infrastructure.clients.irc import IrcConnectionError
from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from modules.notify import QueueServiceError, create_bridge

logger = get_module_logger()

load_dotenv()

# How often the main thread checks whether the consumer is still alive
SUPERVISE_INTERVAL_SECONDS = 1.0


def main() -> int:
    """Main function to start the application.

    Runs the bridge until SIGINT/SIGTERM or until the consumer stops on a
    queue failure. Returns the process exit code.
    """
    logger.info("application_startup")
    list_configs()

    shutdown = threading.Event()

    def request_shutdown(signum, frame):
        logger.info("shutdown_requested", signal=signal.Signals(signum).name)
        shutdown.set()

    signal.signal(signal.SIGINT, request_shutdown)
    signal.signal(signal.SIGTERM, request_shutdown)

    try:
        bridge = create_bridge(settings)
        bridge.start()
    except ValueError as e:
        logger.error("invalid_configuration", error=str(e))
        return 2
    except (IrcConnectionError, QueueServiceError) as e:
        logger.error("application_startup_failed", error=str(e))
        return 1

    while not shutdown.is_set() and bridge.running:
        shutdown.wait(SUPERVISE_INTERVAL_SECONDS)

    try:
        bridge.terminate()
    except QueueServiceError as e:
        logger.error("application_stopped_on_queue_failure", error=str(e))
        return 1

    logger.info("application_shutdown")
    return 0


def list_configs():
    """List all configuration settings keys"""
    config_settings = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


if __name__ == "__main__":
    sys.exit(main())
