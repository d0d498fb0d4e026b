from fiscal_ingest.fiscal.models import FiscalSnapshot
from fiscal_ingest.processor.models import ParseOutcome


class ResultAssembler:
    """Packages pipeline output into ParseOutcome and its JSON contract."""

    METHOD = "PDF Text Extract"

    def success(self, snapshot: FiscalSnapshot, confidence: int) -> ParseOutcome:
        return ParseOutcome(
            success=True,
            method=self.METHOD,
            confidence=confidence,
            snapshot=snapshot,
        )

    def failure(self, error: str) -> ParseOutcome:
        return ParseOutcome(success=False, method=self.METHOD, error=error)

    def to_payload(self, outcome: ParseOutcome) -> dict[str, object]:
        """Transform a ParseOutcome into the JSON-ready response dict.

        Returns:
            Dict with 'success' and either 'data' or 'error'.
        """
        if not outcome.success or outcome.snapshot is None:
            return {"success": False, "error": outcome.error}
        return {
            "success": True,
            "data": self._snapshot_to_dict(
                outcome.snapshot, outcome.confidence, outcome.method
            ),
        }

    def _snapshot_to_dict(
        self,
        snapshot: FiscalSnapshot,
        confidence: int,
        method: str,
    ) -> dict[str, object]:
        identification = snapshot.identification
        totals = snapshot.totals
        data: dict[str, object] = {
            "rut": identification.rut,
            "periodo": identification.period,
            "folio": identification.folio,
            "razonSocial": identification.legal_name,
        }
        for code, entry in snapshot.codes.items():
            data[f"codigo{code}"] = entry.value
        data.update(
            {
                "totalCreditos": totals.net_credit,
                "comprasNetas": totals.net_purchases,
                "ivaDeterminado": totals.determined_tax,
                "totalAPagar": totals.total_payable,
                "margenBruto": totals.gross_margin,
                "confidence": confidence,
                "method": method,
            }
        )
        return data
