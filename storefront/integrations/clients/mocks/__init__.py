"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- Square payment configuration is absent (simulated orders)
- INTEGRATIONS_MODE=mock is set for local development (seed catalog)

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock results must be distinguishable from real ones (OrderResult.simulated).
"""
