# setup logging for WSUDOR_CollectionPolicy
from localConfig import logging, LOGGING_STREAM, LOGGING_LEVEL
logging.basicConfig(stream=LOGGING_STREAM, level=LOGGING_LEVEL)
logging = logging.getLogger('WSUDOR_CollectionPolicy')

# import models
from WSUDOR_CollectionPolicy.errors import ValidationError, ParseError
from WSUDOR_CollectionPolicy.models import CollectionPolicy
