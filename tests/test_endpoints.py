from chain_client.endpoints import block_endpoint


def test_block_endpoint_by_height():
    assert block_endpoint("http://127.0.0.1:8332", 100) == "http://127.0.0.1:8332/block/100"


def test_block_endpoint_by_hash_strips_trailing_slash():
    block_hash = "00000000000000000002a7c4c1e48d76c5a37902165a270156b7a8d72728a054"
    assert block_endpoint("http://node/", block_hash) == f"http://node/block/{block_hash}"
