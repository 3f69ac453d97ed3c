"""
Domain models (roots, request shapes).
"""
from dbxclient.domain.types.request import ApiRequest
from dbxclient.domain.types.root import ROOT_DROPBOX, ROOT_SANDBOX, Root
