# -*- coding: utf-8 -*-

# python modules
import os
from lxml import etree

# Ouroboros config
import localConfig

# Logging
from WSUDOR_CollectionPolicy import logging
logging = logging.getChild('schema')


# bundled XSD, overridden by localConfig.COLLECTION_POLICY_SCHEMA if present
SCHEMA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'xml')
SCHEMA_FILENAME = 'collection_policy.xsd'

# loaded XMLSchema instances, keyed by path
_schemas = {}


def schema_path():

	'''
	Return path to the collection policy XSD
	'''

	if hasattr(localConfig, 'COLLECTION_POLICY_SCHEMA') and localConfig.COLLECTION_POLICY_SCHEMA:
		return localConfig.COLLECTION_POLICY_SCHEMA
	return os.path.join(SCHEMA_DIR, SCHEMA_FILENAME)


def load_schema(path=None):

	'''
	Parse XSD once per path and keep it for the life of the process.
	A broken XSD raises etree.XMLSchemaParseError, that is a deployment problem
	and not something to report as an invalid policy.
	'''

	if path is None:
		path = schema_path()

	if path not in _schemas:
		logging.debug("loading collection policy schema from %s" % path)
		_schemas[path] = etree.XMLSchema(etree.parse(path))

	return _schemas[path]


def validate(tree, path=None):

	'''
	Validate parsed tree (element or ElementTree) against collection policy schema.
	Returns results dictionary with verdict and human readable diagnostics.
	'''

	# reporting
	results_dict = {
		"verdict":True,
		"errors":[]
	}

	schema = load_schema(path)
	if not schema.validate(tree):
		results_dict['verdict'] = False
		results_dict['errors'] = ["line %s: %s" % (error.line, error.message) for error in schema.error_log]
		logging.debug("collection policy failed validation: %s" % results_dict['errors'])

	# finally, return verdict
	return results_dict
