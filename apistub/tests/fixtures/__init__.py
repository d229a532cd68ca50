"""Test fixtures for apistub tests.

This module provides sample OpenAPI documents used across the test suite.
"""

# Minimal OpenAPI 3.0 document with nothing to generate
MINIMAL_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

USER_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'User API', 'version': '1.0.0'},
    'paths': {
        '/users/{id}': {
            'get': {
                'operationId': 'getUser',
                'summary': 'Get a user by id',
                'tags': ['User'],
                'parameters': [
                    {
                        'name': 'id',
                        'in': 'path',
                        'required': True,
                        'schema': {'type': 'integer'},
                    }
                ],
                'responses': {'200': {'description': 'The user'}},
            }
        }
    },
    'components': {
        'schemas': {
            'User': {
                'type': 'object',
                'properties': {
                    'id': {'type': 'integer'},
                    'name': {'type': 'string', 'nullable': False},
                },
            },
            'Color': {'type': 'string', 'enum': ['RED', 'GREEN']},
        }
    },
}

# Petstore-like API with models, several tags and every parameter location
PETSTORE_SPEC = {
    'openapi': '3.0.3',
    'info': {
        'title': 'Petstore API',
        'version': '1.0.0',
        'description': 'A sample Petstore API for testing',
    },
    'servers': [{'url': 'https://petstore.example.com/api/v1'}],
    'paths': {
        '/pets': {
            'get': {
                'operationId': 'listPets',
                'summary': 'List all pets',
                'tags': ['pets'],
                'parameters': [
                    {
                        'name': 'limit',
                        'in': 'query',
                        'schema': {'type': 'integer', 'default': 20},
                    },
                    {
                        'name': 'status',
                        'in': 'query',
                        'schema': {'$ref': '#/components/schemas/PetStatus'},
                    },
                    {
                        'name': 'X-Request-Id',
                        'in': 'header',
                        'schema': {'type': 'string'},
                    },
                ],
                'responses': {'200': {'description': 'A list of pets'}},
            },
            'post': {
                'operationId': 'createPet',
                'summary': 'Create a pet',
                'tags': ['pets', 'admin'],
                'requestBody': {
                    'required': True,
                    'content': {
                        'application/json': {
                            'schema': {'$ref': '#/components/schemas/NewPet'}
                        }
                    },
                },
                'responses': {'201': {'description': 'Created'}},
            },
        },
        '/pets/{petId}': {
            'get': {
                'operationId': 'getPet',
                'description': 'Fetch a single pet.',
                'tags': ['pets'],
                'parameters': [{'$ref': '#/components/parameters/PetId'}],
                'responses': {'200': {'description': 'A pet'}},
            },
            'delete': {
                'operationId': 'deletePet',
                'tags': ['admin'],
                'deprecated': True,
                'parameters': [
                    {'$ref': '#/components/parameters/PetId'},
                    {
                        'name': 'api_key',
                        'in': 'header',
                        'required': True,
                        'schema': {'type': 'string'},
                    },
                    {
                        'name': 'session',
                        'in': 'cookie',
                        'schema': {'type': 'string'},
                    },
                ],
                'responses': {'204': {'description': 'Deleted'}},
            },
        },
        '/pets/{petId}/photo': {
            'put': {
                'operationId': 'uploadPhoto',
                'tags': ['pets'],
                'parameters': [{'$ref': '#/components/parameters/PetId'}],
                'requestBody': {'$ref': '#/components/requestBodies/Photo'},
                'responses': {'200': {'description': 'Uploaded'}},
            }
        },
        '/health': {
            'get': {
                'operationId': 'health',
                'tags': ['system'],
                'responses': {'200': {'description': 'OK'}},
            }
        },
    },
    'components': {
        'schemas': {
            'Pet': {
                'type': 'object',
                'properties': {
                    'id': {'type': 'integer', 'format': 'int64', 'nullable': False},
                    'name': {
                        'type': 'string',
                        'description': 'Name of the pet',
                        'nullable': False,
                    },
                    'status': {'$ref': '#/components/schemas/PetStatus'},
                    'tags': {'type': 'array', 'items': {'type': 'string'}},
                    'vaccinated': {'type': 'boolean', 'default': False},
                },
            },
            'NewPet': {
                'type': 'object',
                'properties': {
                    'name': {'type': 'string', 'nullable': False},
                    'status': {'type': 'string', 'default': 'available'},
                },
            },
            'PetStatus': {
                'type': 'string',
                'enum': ['available', 'pending', 'sold'],
            },
            'Priority': {'type': 'integer', 'enum': [1, 2, 3]},
            'PetList': {
                'type': 'array',
                'items': {'$ref': '#/components/schemas/Pet'},
            },
            'Freeform': {'type': 'object'},
            'Anything': {},
        },
        'parameters': {
            'PetId': {
                'name': 'petId',
                'in': 'path',
                'required': True,
                'schema': {'type': 'integer'},
            }
        },
        'requestBodies': {
            'Photo': {
                'content': {
                    'multipart/form-data': {
                        'schema': {
                            'type': 'object',
                            'properties': {
                                'file': {'type': 'string', 'format': 'binary'}
                            },
                        }
                    },
                    'application/json': {'schema': {'type': 'object'}},
                }
            }
        },
    },
}

MISSING_OPERATION_ID_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Broken API', 'version': '1.0.0'},
    'paths': {
        '/things': {
            'get': {
                'tags': ['things'],
                'responses': {'200': {'description': 'OK'}},
            }
        }
    },
    'components': {'schemas': {'Thing': {'type': 'string'}}},
}

MISSING_TAGS_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Broken API', 'version': '1.0.0'},
    'paths': {
        '/things': {
            'get': {
                'operationId': 'listThings',
                'responses': {'200': {'description': 'OK'}},
            }
        }
    },
}
