"""
Change Calendar Setup Lambda
onEvent handler for the custom-resource provider that owns an SSM change calendar
"""
import json
import logging

from calendar_setup import Settings, on_event

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event, context):
    """
    Lambda handler for calendar Create/Update/Delete events

    Failures are re-raised so the provider framework reports them to CloudFormation
    """
    try:
        settings = Settings.from_env(load_env_file=False)
        try:
            logger.setLevel(settings.log_level)
        except ValueError:
            logger.setLevel(logging.INFO)
            logger.warning(f"Unknown LOG_LEVEL {settings.log_level!r}, using INFO")

        logger.info(f"Event: {json.dumps(event)}")
        return on_event(event, context, settings=settings)
    except Exception as e:
        logger.error(f"Error: {str(e)}", exc_info=True)
        raise
