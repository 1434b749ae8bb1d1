"""Constantes HTTP pour éviter les valeurs magiques dans le code.

Codes de statut utilisés par les enveloppes d'erreur des actions.
"""

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_SERVER_ERROR = 500
HTTP_SERVICE_UNAVAILABLE = 503
