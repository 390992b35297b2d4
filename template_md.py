# template_md.py
# Templates padrão (Markdown) da página de endereços. Sem dependências.
TEMPLATE = """# Contract addresses

| Contract | Address |
|---|---|
| Mangrove | `{{ Mangrove }}` |
| MgvCleaner | `{{ MgvCleaner }}` |
| MgvReader | `{{ MgvReader }}` |
| MgvOracle | `{{ MgvOracle }}` |

## Previous deployments
"""

TEMPLATE_PREVIOUS = """
### Version {{ id }}

| Contract | Address |
|---|---|
| Mangrove | `{{ Mangrove }}` |
| MgvCleaner | `{{ MgvCleaner }}` |
| MgvReader | `{{ MgvReader }}` |
| MgvOracle | `{{ MgvOracle }}` |
"""
