"""Application search – listing query compilation."""
from nft_market.application.search.compiler import (
    QUERY_VARIABLES,
    AddressResolver,
    CompiledQuery,
    ListingQueryCompiler,
    body_shape_predicate,
)
from nft_market.application.search.predicates import (
    Contains,
    EnumValue,
    Equals,
    InSet,
    Predicate,
    RangeGreaterThan,
    Var,
    render_predicate,
    render_value,
    render_where,
)
from nft_market.application.search.request import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListingFilters,
    SearchRequest,
)

__all__ = [
    "AddressResolver",
    "CompiledQuery",
    "Contains",
    "DEFAULT_PAGE_SIZE",
    "EnumValue",
    "Equals",
    "InSet",
    "ListingFilters",
    "ListingQueryCompiler",
    "MAX_PAGE_SIZE",
    "Predicate",
    "QUERY_VARIABLES",
    "RangeGreaterThan",
    "SearchRequest",
    "Var",
    "body_shape_predicate",
    "render_predicate",
    "render_value",
    "render_where",
]
