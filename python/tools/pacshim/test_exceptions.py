from pacshim.exceptions import (
    CommandError,
    ConflictingPrimaryOperationError,
    MixedScopeRequestError,
    PacshimError,
    UnsupportedOperationError,
)


class TestExceptions:
    def test_all_errors_share_a_base(self):
        assert issubclass(CommandError, PacshimError)
        assert issubclass(UnsupportedOperationError, PacshimError)

    def test_conflict_message(self):
        error = ConflictingPrimaryOperationError("S", "R")
        assert "-S" in str(error) and "-R" in str(error)
        assert error.exit_code == 1

    def test_to_dict(self):
        error = MixedScopeRequestError("Suy", ["vim"])
        data = error.to_dict()
        assert data["error_type"] == "MixedScopeRequestError"
        assert data["error_code"] == "MIXEDSCOPEREQUESTERROR"
        assert data["context"]["operation"] == "Suy"
        assert data["context"]["additional_data"] == {"packages": ["vim"]}

    def test_unsupported_operation_context(self):
        error = UnsupportedOperationError("Qo", "homebrew")
        assert "function not implemented on this system" in str(error)
        assert error.context.host == "homebrew"

    def test_command_error_exit_code(self):
        error = CommandError(["eix", "-I"], "No such file or directory")
        assert error.exit_code == 127
        assert error.context.command == ["eix", "-I"]
