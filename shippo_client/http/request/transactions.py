"""Transaction (label purchase) parameters."""

from shippo_client.http.request.base import RequestBuilder
from shippo_client.validators import one_of

LABEL_FILE_TYPES = ("PNG", "PDF", "PDF_4X6", "ZPLII")


class CreateTransaction(RequestBuilder):
    def get_rate(self) -> str:
        """Object id of the rate to purchase."""
        return self._attributes.must_have("rate").as_string()

    def get_label_file_type(self) -> str:
        return self._attributes.may_have("label_file_type").as_string(
            one_of(*LABEL_FILE_TYPES)
        )

    def get_async(self) -> bool:
        """When true the service answers before the label is generated."""
        return self._attributes.may_have("async").as_boolean()

    def _field_getters(self):
        return {
            "rate": self.get_rate,
            "label_file_type": self.get_label_file_type,
            "async": self.get_async,
            "metadata": self.get_metadata,
        }
