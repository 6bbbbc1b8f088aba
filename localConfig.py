# Ouroboros config
'''
Local configuration for WSUDOR_CollectionPolicy.
Deployments override these values in place; anything left unset falls back
to the defaults read by the package.
'''

import logging
import sys


# logging
LOGGING_STREAM = sys.stdout
LOGGING_LEVEL = logging.INFO


# collection policy
'''
dsid stamped on content_model entries added to a collection policy,
e.g. 'MODS' to point new members at their descriptive metadata form
'''
COLLECTION_POLICY_DEFAULT_DSID = ''

# uncomment to validate against an XSD other than the one bundled with the package
# COLLECTION_POLICY_SCHEMA = '/opt/ouroboros/xml/collection_policy.xsd'
