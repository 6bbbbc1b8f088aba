# -*- coding: utf-8 -*-

# python modules
from lxml import etree

# Ouroboros config
import localConfig

# WSUDOR_CollectionPolicy
from WSUDOR_CollectionPolicy import schema
from WSUDOR_CollectionPolicy.errors import ValidationError, ParseError

# Logging
from WSUDOR_CollectionPolicy import logging
logging = logging.getChild('CollectionPolicy')


# namespaces used by collection policy datastreams
ISLANDORA_NS = 'http://www.islandora.ca'
XSI_NS = 'http://www.w3.org/2001/XMLSchema-instance'
SCHEMA_LOCATION = 'http://www.islandora.ca http://syn.lib.umanitoba.ca/collection_policy.xsd'

DEFAULT_RELATIONSHIP = 'isMemberOfCollection'


class CollectionPolicy(object):

	'''
	In-memory collection policy, as stored in a collection object's
	COLLECTION_POLICY datastream.

		<collection_policy xmlns="http://www.islandora.ca" name="...">
			<content_models>
				<content_model pid="..." name="..." namespace="..." dsid="..."/>
			</content_models>
			<search_terms/>
			<staging_area/>
			<relationship>isMemberOfCollection</relationship>
		</collection_policy>

	Instances are only created from documents that validate against the
	collection policy schema.  Mutators do not re-validate, call validate()
	before handing getXML() off for storage if that matters.
	'''

	def __init__(self, root, default_dsid=None):

		self.root = root
		self.default_dsid = default_dsid

		# validate on construction, never hand back an invalid policy
		self.validate()


	@classmethod
	def fromXML(cls, xml_string, default_dsid=None):

		'''
		Parse serialized policy, str or bytes.  Raises ParseError for malformed
		markup, ValidationError for well-formed documents the schema rejects.
		'''

		# lxml refuses str input carrying an encoding declaration, re-encode and
		# make the parser ignore whatever encoding the declaration names
		if isinstance(xml_string, str):
			xml_string = xml_string.encode('utf-8')
			parser = etree.XMLParser(remove_blank_text=True, encoding='utf-8')
		else:
			parser = etree.XMLParser(remove_blank_text=True)
		try:
			root = etree.fromstring(xml_string, parser)
		except etree.XMLSyntaxError as e:
			logging.debug("could not parse collection policy: %s" % e)
			raise ParseError("collection policy is not well-formed XML", [str(e)])

		return cls(root, default_dsid=default_dsid)


	@classmethod
	def fromFile(cls, path, default_dsid=None):
		with open(path, 'rb') as fhand:
			return cls.fromXML(fhand.read(), default_dsid=default_dsid)


	@classmethod
	def empty(cls, default_dsid=None):

		'''
		Minimal valid policy: no name, no content models, default relationship
		'''

		# build root node, nsmap, and attributes
		NSMAP = {
			None:ISLANDORA_NS,
			'xsi':XSI_NS
		}
		root = etree.Element('{%s}collection_policy' % ISLANDORA_NS, nsmap=NSMAP)
		root.set('name', '')
		root.set('{%s}schemaLocation' % XSI_NS, SCHEMA_LOCATION)

		# placeholders, kept for the schema
		for child in ['content_models', 'search_terms', 'staging_area']:
			etree.SubElement(root, '{%s}%s' % (ISLANDORA_NS, child))

		relationship_node = etree.SubElement(root, '{%s}relationship' % ISLANDORA_NS)
		relationship_node.text = DEFAULT_RELATIONSHIP

		return cls(root, default_dsid=default_dsid)


	def validate(self):
		results = schema.validate(self.root)
		if not results['verdict']:
			raise ValidationError("collection policy does not conform to schema", results['errors'])


	def isValid(self):
		return schema.validate(self.root)['verdict']


	# qualify local name with namespace of the root element
	def _tag(self, name):
		namespace = etree.QName(self.root).namespace
		if namespace:
			return '{%s}%s' % (namespace, name)
		return name


	def _contentModelsNode(self):
		return self.root.find(self._tag('content_models'))


	def _contentModelNodes(self):
		content_models_node = self._contentModelsNode()
		if content_models_node is None:
			return []
		return content_models_node.findall(self._tag('content_model'))


	def getName(self):
		return self.root.get('name', '')


	def getRelationship(self):
		relationship_node = self.root.find(self._tag('relationship'))
		if relationship_node is None or relationship_node.text is None:
			return ''
		return relationship_node.text


	def getContentModels(self):

		'''
		Return dictionary of content models, keyed by pid.

		Some older policies stored a full pid (e.g. "islandora:collection") as
		the namespace, only the prefix before the first colon is returned.
		If a pid appears more than once the last entry wins.
		'''

		content_models = {}
		for node in self._contentModelNodes():
			pid = node.get('pid', '')
			content_models[pid] = {
				'pid':pid,
				'name':node.get('name', ''),
				'namespace':node.get('namespace', '').split(':')[0]
			}

		return content_models


	def addContentModel(self, pid, name, namespace, dsid=None):

		'''
		Append content_model entry.  Namespace is stored as given, and no check
		is made for an existing entry with the same pid.
		'''

		if dsid is None:
			dsid = self._defaultDsid()

		content_models_node = self._contentModelsNode()
		if content_models_node is None:
			logging.warning("no content_models element found, could not add %s" % pid)
			return

		logging.debug("adding content model %s, namespace %s, dsid %s" % (pid, namespace, dsid))
		content_model_node = etree.SubElement(content_models_node, self._tag('content_model'))
		content_model_node.set('pid', pid)
		content_model_node.set('name', name)
		content_model_node.set('namespace', namespace)
		content_model_node.set('dsid', dsid)


	def _defaultDsid(self):
		if self.default_dsid is not None:
			return self.default_dsid
		if hasattr(localConfig, 'COLLECTION_POLICY_DEFAULT_DSID'):
			return localConfig.COLLECTION_POLICY_DEFAULT_DSID or ''
		return ''


	def removeContentModel(self, candidates):

		'''
		Remove content models by pid, first match in document order per candidate.
		Accepts list of pids, or single pid.

		NOTE: returns number of candidates processed, not number removed.
		Candidates without a match, or that are not strings, are still counted.
		'''

		if isinstance(candidates, str):
			candidates = [candidates]

		count = 0
		for candidate in candidates:
			count += 1

			if not isinstance(candidate, str):
				logging.debug("skipping content model candidate %r, not a pid" % (candidate,))
				continue

			for node in self._contentModelNodes():
				if node.get('pid') == candidate:
					logging.debug("removing content model %s" % candidate)
					node.getparent().remove(node)
					break

		return count


	def getXML(self):
		logging.debug("serializing collection policy %s" % self.getName())
		return etree.tostring(self.root, xml_declaration=True, encoding='UTF-8', pretty_print=True).decode('utf-8')
