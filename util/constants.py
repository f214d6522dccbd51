class InternalURIs:
    API = "/api"
    V1 = API + "/v1"
    CLAIMS = V1 + "/claims"
    RELEASE_CLAIM = CLAIMS + "/release"
    MY_CLAIMS = CLAIMS + "/mine"
    AUTOCOMPLETE_CLAIM = V1 + "/autocomplete/claim"
    AUTOCOMPLETE_UNCLAIM = V1 + "/autocomplete/unclaim"
    OK_CHANNEL = V1 + "/config/ok-channel"


class ExternalURIs:
    # Discord REST paths, relative to settings.DISCORD_API_URL
    CREATE_DM = "/users/@me/channels"
    CHANNEL_MESSAGES = "/channels/{channel_id}/messages"


# Discord autocomplete responses are capped at 25 choices.
AUTOCOMPLETE_PAGE_SIZE = 25
