"""Constants for search routes."""

CATALOG_UNAVAILABLE_DETAIL = "Erro ao buscar cidades disponíveis."
GENERIC_RETRY_DETAIL = "Não foi possível consultar os dados agora. Tente novamente."
