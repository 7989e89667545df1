"""
Service layer of the short link service.

- id_deriver: content-addressed short ids
- record_codec: canonical record bytes
- link_store: key-value persistence of records
- link_service: create / look up use cases
- redirect_service: share page context
"""
