# -*- coding: utf-8 -*-
# WSUDOR_CollectionPolicy : errors


'''
desc: exceptions raised while building a CollectionPolicy
'''


class ValidationError(Exception):

	'''
	Document does not conform to the collection policy schema.
	"errors" holds the validator diagnostics, one string per problem.
	'''

	def __init__(self, message, errors=None):
		Exception.__init__(self, message)
		self.message = message
		self.errors = errors or []


	def __str__(self):
		if self.errors:
			return "%s: %s" % (self.message, "; ".join(self.errors))
		return self.message


class ParseError(ValidationError):

	'''
	Input is not well-formed XML, never reached schema validation.
	'''

	pass
