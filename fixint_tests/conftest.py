import os

from fixint.log import LoggingOutput, setup_logging

UNITTESTS_SETTINGS_FILEPATH = os.path.join(os.path.dirname(__file__), 'unittests.yml')

os.environ['FIXINT_CONFIG_YAML'] = os.environ.get('FIXINT_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# structlog prints to stdout unless configured, which would leak into doctest output
setup_logging(logging_output=LoggingOutput.NULL)
