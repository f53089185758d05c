# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: bloomfilter.proto
"""Generated protocol buffer code."""
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\x0a\x11bloomfilter.proto\x12\x0bbloomfilter\x22\x22\x0a\x0aAddRequest\x12\x14\x0a\x05elems\x18\x01\x20\x03\x28\x0c\x52\x05elems\x22\x0d\x0a\x0bAddResponse\x22\x24\x0a\x0cCheckRequest\x12\x14\x0a\x05elems\x18\x01\x20\x03\x28\x0c\x52\x05elems\x22\x27\x0a\x0dCheckResponse\x12\x16\x0a\x06checks\x18\x01\x20\x03\x28\x08\x52\x06checks\x32\x87\x01\x0a\x0bBloomFilter\x12\x38\x0a\x03Add\x12\x17.bloomfilter.AddRequest\x1a\x18.bloomfilter.AddResponse\x12\x3e\x0a\x05Check\x12\x19.bloomfilter.CheckRequest\x1a\x1a.bloomfilter.CheckResponse\x62\x06proto3')

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'bloomfilter_pb2', _globals)
if _descriptor._USE_C_DESCRIPTORS == False:
  DESCRIPTOR._options = None
  _globals['_ADDREQUEST']._serialized_start=34
  _globals['_ADDREQUEST']._serialized_end=68
  _globals['_ADDRESPONSE']._serialized_start=70
  _globals['_ADDRESPONSE']._serialized_end=83
  _globals['_CHECKREQUEST']._serialized_start=85
  _globals['_CHECKREQUEST']._serialized_end=121
  _globals['_CHECKRESPONSE']._serialized_start=123
  _globals['_CHECKRESPONSE']._serialized_end=162
  _globals['_BLOOMFILTER']._serialized_start=165
  _globals['_BLOOMFILTER']._serialized_end=300
# @@protoc_insertion_point(module_scope)
