"""Static catalogs used by niche resolution, query parsing and location sync."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Canonical niche labels; free-text niches are corrected towards these.
CANONICAL_NICHES: tuple[str, ...] = (
    "farmacia",
    "farmácia de manipulação",
    "salão de beleza",
    "oficina mecânica",
    "dentista",
    "clínica de estética",
    "pizzaria",
    "advogado",
    "energia solar",
    "pet shop",
    "restaurante",
    "imobiliária",
    "academia",
    "contabilidade",
)

# Major cities recognised by the single-box query parser. Not synchronized
# with the `locations` table.
CITY_GAZETTEER: tuple[str, ...] = (
    "Recife", "Natal", "São Paulo", "Rio de Janeiro", "Salvador",
    "Fortaleza", "Belo Horizonte", "Curitiba", "Porto Alegre", "Brasília",
    "Manaus", "Belém", "Goiânia", "Guarulhos", "Campinas", "São Luís",
    "São Gonçalo", "Maceió", "Duque de Caxias", "Campo Grande", "Teresina",
    "João Pessoa", "Osasco", "Jaboatão dos Guararapes", "Ribeirão Preto",
    "Uberlândia", "Contagem", "Sorocaba", "Aracaju", "Feira de Santana",
    "Cuiabá", "Joinville", "Aparecida de Goiânia", "Londrina", "Niterói",
    "Ananindeua", "Porto Velho", "Serra", "Caxias do Sul", "Macapá",
    "Florianópolis", "Santos", "Mauá", "Betim", "São José dos Campos",
    "Olinda", "Caruaru", "Petrolina", "Cabo de Santo Agostinho", "Paulista",
)

# DataForSEO location codes for capitals, checked against
# keywords_data/google_ads/locations/br. Takes precedence over API name matching.
MANUAL_CITY_LOCATION_CODES: Mapping[str, int] = MappingProxyType({
    "Maceió": 1001506,
    "Manaus": 1001511,
    "Salvador": 1001533,
    "Fortaleza": 1001556,
    "Brasília": 1001563,
    "Vitória": 1001568,
    "Goiânia": 1001574,
    "São Luís": 1001584,
    "Belo Horizonte": 1001596,
    "Campo Grande": 1001612,
    "Cuiabá": 1001621,
    "Belém": 1001631,
    "João Pessoa": 1001634,
    "Curitiba": 1001640,
    "Recife": 1001643,
    "Teresina": 1001648,
    "Rio de Janeiro": 1001655,
    "Natal": 1001662,
    "Porto Alegre": 1001674,
    "Florianópolis": 1001688,
    "Aracaju": 1001695,
    "São Paulo": 1001773,
    "Campinas": 1001764,
})
