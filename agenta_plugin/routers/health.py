from fastapi import APIRouter

from agenta_plugin.descriptors.node import describe_node

router = APIRouter()

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/node")
def node_description():
    return describe_node()
