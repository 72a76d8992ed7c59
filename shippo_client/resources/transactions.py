from shippo_client.http.request.transactions import CreateTransaction
from shippo_client.http.response.transactions import (
    Transaction,
    TransactionCollection,
)
from shippo_client.resources.base import Resource


class Transactions(Resource):
    path = "transactions/"
    request_class = CreateTransaction
    entity_class = Transaction
    collection_class = TransactionCollection
