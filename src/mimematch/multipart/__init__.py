from .encoding import append_multipart_field, append_multipart_terminator, build_multipart_body

__all__ = ["append_multipart_field", "append_multipart_terminator", "build_multipart_body"]
