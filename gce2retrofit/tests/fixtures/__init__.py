"""Test fixtures for gce2retrofit tests.

This module provides sample discovery documents for testing the code
generation functionality.
"""

# Discovery document without schemas or resources
EMPTY_DISCOVERY = {
    'kind': 'discovery#restDescription',
    'baseUrl': 'https://www.example.com/api/v1/',
}

# One schema and one resource with a single list method
SIMPLE_DISCOVERY = {
    'kind': 'discovery#restDescription',
    'name': 'items',
    'version': 'v1',
    'baseUrl': 'https://www.example.com/items/v1/',
    'schemas': {
        'Item': {
            'id': 'Item',
            'type': 'object',
            'properties': {
                'id': {'type': 'string'},
                'count': {'type': 'integer', 'format': 'int32'},
            },
        }
    },
    'resources': {
        'my_resource': {
            'methods': {
                'list': {
                    'id': 'items.myResource.list',
                    'path': 'items',
                    'httpMethod': 'GET',
                    'parameters': {
                        'pageToken': {'type': 'string', 'location': 'query'},
                    },
                    'response': {'$ref': 'Item'},
                }
            }
        }
    },
}

# Compute-like document covering every descriptor and parameter shape
COMPUTE_DISCOVERY = {
    'kind': 'discovery#restDescription',
    'discoveryVersion': 'v1',
    'name': 'compute',
    'version': 'v1',
    'title': 'Compute Engine API',
    'baseUrl': 'https://www.googleapis.com/compute/v1/projects/',
    'schemas': {
        'Instance': {
            'id': 'Instance',
            'type': 'object',
            'properties': {
                'id': {'type': 'string', 'format': 'uint64'},
                'name': {'type': 'string'},
                'canIpForward': {'type': 'boolean'},
                'cpuPlatformScore': {'type': 'number', 'format': 'double'},
                'tags': {'type': 'array', 'items': {'type': 'string'}},
                'disks': {'type': 'array', 'items': {'$ref': 'AttachedDisk'}},
                'metadata': {'$ref': 'Metadata'},
            },
        },
        'AttachedDisk': {
            'id': 'AttachedDisk',
            'type': 'object',
            'properties': {
                'index': {'type': 'integer'},
                'source': {'type': 'string'},
            },
        },
        'Metadata': {
            'id': 'Metadata',
            'type': 'object',
            'properties': {
                'fingerprint': {'type': 'string', 'format': 'byte'},
            },
        },
        'Operation': {
            'id': 'Operation',
            'type': 'object',
            'properties': {
                'status': {'type': 'string'},
                'progress': {'type': 'integer'},
            },
        },
    },
    'resources': {
        'instances': {
            'methods': {
                'get': {
                    'id': 'compute.instances.get',
                    'path': '{project}/zones/{zone}/instances/{instance}',
                    'httpMethod': 'GET',
                    'parameters': {
                        'instance': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'project': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'zone': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                    },
                    'parameterOrder': ['project', 'zone', 'instance'],
                    'response': {'$ref': 'Instance'},
                },
                'insert': {
                    'id': 'compute.instances.insert',
                    'path': '{project}/zones/{zone}/instances',
                    'httpMethod': 'POST',
                    'parameters': {
                        'project': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'zone': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                    },
                    'parameterOrder': ['project', 'zone'],
                    'request': {'$ref': 'Instance', 'parameterName': 'resource'},
                    'response': {'$ref': 'Operation'},
                },
                'list': {
                    'id': 'compute.instances.list',
                    'path': '{project}/zones/{zone}/instances',
                    'httpMethod': 'GET',
                    'parameters': {
                        'filter': {'type': 'string', 'location': 'query'},
                        'maxResults': {
                            'type': 'integer',
                            'default': '500',
                            'location': 'query',
                        },
                        'pageToken': {'type': 'string', 'location': 'query'},
                        'project': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'zone': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                    },
                    'parameterOrder': ['project', 'zone'],
                    'response': {'$ref': 'Instance'},
                },
                'delete': {
                    'id': 'compute.instances.delete',
                    'path': '{project}/zones/{zone}/instances/{instance}',
                    'httpMethod': 'DELETE',
                    'parameters': {
                        'project': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'zone': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'instance': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                    },
                    'parameterOrder': ['project', 'zone', 'instance'],
                },
            }
        },
        'target_http_proxies': {
            'methods': {
                'setUrlMap': {
                    'id': 'compute.targetHttpProxies.setUrlMap',
                    'path': '{project}/targetHttpProxies/{targetHttpProxy}/setUrlMap',
                    'httpMethod': 'POST',
                    'parameters': {
                        'project': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'targetHttpProxy': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                    },
                    'parameterOrder': ['project', 'targetHttpProxy'],
                    'request': {'$ref': 'Metadata', 'parameterName': 'resource'},
                    'response': {'$ref': 'Operation'},
                }
            }
        },
    },
}

CLASS_MAP_TEXT = 'id\tLong\nnot a valid line\nfingerprint\tbyte[]\n'
