"""Table formatting shared by the one-shot commands and the console."""

from __future__ import annotations

from vms.application.dto import CustomerDTO, VoucherDTO


def voucher_lines(vouchers: list[VoucherDTO]) -> list[str]:
    if not vouchers:
        return ["No vouchers found."]
    lines = [f"{'ID':<36}  {'Type':<16} {'Amount':>7}  Discount", "-" * 72]
    for v in vouchers:
        lines.append(
            f"{v.id:<36}  {v.voucher_type:<16} {v.discount_amount:>7}  {v.description}"
        )
    return lines


def customer_lines(customers: list[CustomerDTO]) -> list[str]:
    if not customers:
        return ["No customers found."]
    lines = [f"{'ID':<36}  {'Name':<20} Created", "-" * 82]
    for c in customers:
        lines.append(f"{c.id:<36}  {c.name:<20} {c.created_at}")
    return lines
