from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MaxInvoiceDTO(BaseModel):
    max_invoice_id: int | None = Field(alias="maxInvoiceId")

    model_config = ConfigDict(validate_by_name=True)

