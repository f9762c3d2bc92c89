"""
Invoice Tools

Provides 9 MCP tools:
1. search_invoices - Outgoing (customer) invoices by date range
2. get_invoice - One outgoing invoice
3. search_supplier_invoices - Incoming (supplier) invoices by date range
4. get_supplier_invoice - One supplier invoice
5. get_supplier_invoices_for_approval - Supplier invoices awaiting approval
6. approve_supplier_invoice / 7. approve_supplier_invoices
8. reject_supplier_invoice / 9. reject_supplier_invoices

Rejections require a comment. Query values that are empty strings are not
sent, so an empty rejection comment reaches Tripletex as a missing comment
and is rejected there.
"""

from ..server import mcp
from .base import DESTRUCTIVE, READ_ONLY, run_tool

# ============================================================================
# Outgoing invoices
# ============================================================================


@mcp.tool(annotations=READ_ONLY)
async def search_invoices(
    invoice_date_from: str,
    invoice_date_to: str,
    invoice_number: str | None = None,
    customer_id: str | None = None,
    offset: int | None = None,
    count: int | None = None,
) -> dict:
    """
    Search outgoing (customer) invoices by date range.

    Args:
        invoice_date_from: From date inclusive (yyyy-MM-dd)
        invoice_date_to: To date exclusive (yyyy-MM-dd)
        invoice_number: Filter by invoice number
        customer_id: Filter by customer ID
        offset: Pagination offset
        count: Number of results
    """
    return await run_tool(
        "search_invoices",
        invoice_date_from=invoice_date_from,
        invoice_date_to=invoice_date_to,
        invoice_number=invoice_number,
        customer_id=customer_id,
        offset=offset,
        count=count,
    )


@mcp.tool(annotations=READ_ONLY)
async def get_invoice(id: int) -> dict:
    """
    Get a single outgoing invoice by ID.

    Args:
        id: Invoice ID
    """
    return await run_tool("get_invoice", id=id)


# ============================================================================
# Supplier invoices
# ============================================================================


@mcp.tool(annotations=READ_ONLY)
async def search_supplier_invoices(
    invoice_date_from: str,
    invoice_date_to: str,
    invoice_number: str | None = None,
    supplier_id: str | None = None,
    offset: int | None = None,
    count: int | None = None,
) -> dict:
    """
    Search incoming (supplier) invoices by date range.

    Args:
        invoice_date_from: From date inclusive (yyyy-MM-dd)
        invoice_date_to: To date exclusive (yyyy-MM-dd)
        invoice_number: Filter by invoice number
        supplier_id: Filter by supplier ID
        offset: Pagination offset
        count: Number of results
    """
    return await run_tool(
        "search_supplier_invoices",
        invoice_date_from=invoice_date_from,
        invoice_date_to=invoice_date_to,
        invoice_number=invoice_number,
        supplier_id=supplier_id,
        offset=offset,
        count=count,
    )


@mcp.tool(annotations=READ_ONLY)
async def get_supplier_invoice(id: int) -> dict:
    """
    Get a single supplier invoice by ID.

    Args:
        id: Supplier invoice ID
    """
    return await run_tool("get_supplier_invoice", id=id)


@mcp.tool(annotations=READ_ONLY)
async def get_supplier_invoices_for_approval(
    search_text: str | None = None,
    show_all: bool | None = None,
    employee_id: int | None = None,
    offset: int | None = None,
    count: int | None = None,
) -> dict:
    """
    Get supplier invoices that are pending approval.

    Args:
        search_text: Search text (department, employee, project)
        show_all: Show all invoices, not just own (default false)
        employee_id: Employee ID (defaults to logged in)
        offset: Pagination offset
        count: Number of results
    """
    return await run_tool(
        "get_supplier_invoices_for_approval",
        search_text=search_text,
        show_all=show_all,
        employee_id=employee_id,
        offset=offset,
        count=count,
    )


@mcp.tool()
async def approve_supplier_invoice(invoice_id: int, comment: str | None = None) -> dict:
    """
    Approve a supplier invoice.

    Args:
        invoice_id: Supplier invoice ID to approve
        comment: Optional approval comment
    """
    return await run_tool("approve_supplier_invoice", invoice_id=invoice_id, comment=comment)


@mcp.tool()
async def approve_supplier_invoices(invoice_ids: str, comment: str | None = None) -> dict:
    """
    Approve multiple supplier invoices at once.

    Args:
        invoice_ids: Comma-separated invoice IDs
        comment: Optional approval comment
    """
    return await run_tool(
        "approve_supplier_invoices", invoice_ids=invoice_ids, comment=comment
    )


@mcp.tool(annotations=DESTRUCTIVE)
async def reject_supplier_invoice(invoice_id: int, comment: str) -> dict:
    """
    Reject a supplier invoice. A comment is required.

    Args:
        invoice_id: Supplier invoice ID to reject
        comment: Rejection reason (required)
    """
    return await run_tool("reject_supplier_invoice", invoice_id=invoice_id, comment=comment)


@mcp.tool(annotations=DESTRUCTIVE)
async def reject_supplier_invoices(invoice_ids: str, comment: str) -> dict:
    """
    Reject multiple supplier invoices at once. A comment is required.

    Args:
        invoice_ids: Comma-separated invoice IDs
        comment: Rejection reason (required)
    """
    return await run_tool("reject_supplier_invoices", invoice_ids=invoice_ids, comment=comment)
