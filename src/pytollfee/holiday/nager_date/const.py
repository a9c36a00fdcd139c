"""Constants for the Nager.Date provider."""

API_URI = "api/v3"
PUBLIC_HOLIDAYS_ENDPOINT = "/PublicHolidays/{year}/{country_code}"

PUBLIC_HOLIDAY_TYPE = "Public"

# Returned for country codes the service does not cover.
UNSUPPORTED_COUNTRY_STATUSES = (204, 404)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "pytollfee-nager-date",
}
