# -*- coding: utf-8 -*-

'''
This should be run from the root directory: py.test --verbose
'''

import os
from lxml import etree

import localConfig
from WSUDOR_CollectionPolicy import schema


def parse(xml_string):
	return etree.fromstring(xml_string.encode('utf-8'))


class TestSchemaClass:

	def test_bundled_schema_path(self):
		assert os.path.exists(schema.schema_path())
		assert schema.schema_path().endswith('collection_policy.xsd')

	def test_schema_path_override(self, monkeypatch):
		monkeypatch.setattr(localConfig, 'COLLECTION_POLICY_SCHEMA', '/opt/ouroboros/xml/other.xsd', raising=False)
		assert schema.schema_path() == '/opt/ouroboros/xml/other.xsd'

	def test_schema_cached(self):
		assert schema.load_schema() is schema.load_schema()

	def test_valid(self):
		tree = parse('<collection_policy xmlns="http://www.islandora.ca" name=""><content_models/><search_terms/><staging_area/><relationship>isMemberOfCollection</relationship></collection_policy>')
		assert schema.validate(tree) == {"verdict":True, "errors":[]}

	def test_invalid_reports_errors(self):
		results = schema.validate(parse('<not-a-policy/>'))
		assert results['verdict'] == False
		assert len(results['errors']) > 0
		assert results['errors'][0].startswith("line ")

	def test_elements_out_of_order(self):
		tree = parse('<collection_policy xmlns="http://www.islandora.ca" name=""><search_terms/><content_models/><staging_area/><relationship/></collection_policy>')
		assert schema.validate(tree)['verdict'] == False

	def test_name_required(self):
		tree = parse('<collection_policy xmlns="http://www.islandora.ca"><content_models/><search_terms/><staging_area/><relationship/></collection_policy>')
		assert schema.validate(tree)['verdict'] == False
