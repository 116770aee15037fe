"""Process exit codes returned by the spineapi command line tool."""

SUCCESS = 0
USAGE_ERROR = 2
DECODE_ERROR = 3
TRANSPORT_FAILURE = 4
UNEXPECTED_ERROR = 5
