"""Form builder rendering label + input pairs for model objects."""

from forms.builder import FormBuilder, form_for

__all__ = ["FormBuilder", "form_for"]
