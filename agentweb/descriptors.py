# =============================================================================
# agentweb/descriptors.py  -  The Three Tool Contracts
# =============================================================================
#
# These descriptors are the ONLY thing the LLM sees before deciding to call a
# tool, so the descriptions say what comes back, not just what goes in.
#
# The search schema mirrors the /v1/search query string one-to-one.  The
# limit/offset defaults are advisory (the API applies them itself); the
# gateway never fills them in.
# =============================================================================

from agentweb.models import ToolDescriptor

SEARCH_BUSINESSES = ToolDescriptor(
    name="search_businesses",
    description=(
        "Search for businesses in the AgentWeb directory. Search by text query, "
        "category, location (city/country or lat/lng with radius). Returns "
        "business info including name, address, phone, email, website, hours, "
        "and more."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "q": {
                "type": "string",
                "description": "Text search query (business name, keywords, etc.)",
            },
            "category": {
                "type": "string",
                "description": "Business category filter (e.g., 'restaurant', 'hotel')",
            },
            "city": {
                "type": "string",
                "description": "City name for location filter",
            },
            "country": {
                "type": "string",
                "description": "Country code (ISO 3166-1 alpha-2, e.g., 'US', 'GB')",
            },
            "lat": {
                "type": "number",
                "description": "Latitude for geographic search (requires lng and radius_km)",
            },
            "lng": {
                "type": "number",
                "description": "Longitude for geographic search (requires lat and radius_km)",
            },
            "radius_km": {
                "type": "number",
                "description": "Search radius in kilometers (used with lat/lng)",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results to return (default: 10, max: 50)",
                "default": 10,
            },
            "offset": {
                "type": "number",
                "description": "Number of results to skip for pagination",
                "default": 0,
            },
        },
    },
)

GET_BUSINESS = ToolDescriptor(
    name="get_business",
    description=(
        "Get full details for a specific business by its ID. Returns complete "
        "business information including all available fields."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "description": "The unique business ID from AgentWeb",
            },
        },
        "required": ["id"],
    },
)

AGENTWEB_HEALTH = ToolDescriptor(
    name="agentweb_health",
    description=(
        "Check the health status of the AgentWeb API, including total number "
        "of businesses and countries available."
    ),
    input_schema={
        "type": "object",
        "properties": {},
    },
)

TOOL_DESCRIPTORS: tuple[ToolDescriptor, ...] = (
    SEARCH_BUSINESSES,
    GET_BUSINESS,
    AGENTWEB_HEALTH,
)
