"""Protobuf/gRPC modules generated from ``protos/bloomfilter.proto``.

Regenerate with::

    python -m grpc_tools.protoc -Iprotos \
        --python_out=jwt_revoker/backends/generated \
        --grpc_python_out=jwt_revoker/backends/generated \
        protos/bloomfilter.proto

then point the ``bloomfilter_pb2`` import in ``bloomfilter_pb2_grpc.py`` at
this package.
"""
