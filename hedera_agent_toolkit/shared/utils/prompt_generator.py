from .account_resolver import AccountResolver
from ..configuration import AgentMode, Context


class PromptGenerator:
    """
    Builds the shared pieces of tool descriptions: the context snippet, account
    parameter descriptions and the usage rules appended to every tool prompt.
    """

    @staticmethod
    def get_context_snippet(context: Context) -> str:
        """
        Describes the mode and the default account the tool will act for.
        """
        lines = ["Context:"]

        if context.mode == AgentMode.RETURN_BYTES:
            lines.append(
                "- Mode: Return Bytes (transactions are frozen and returned unsigned)"
            )
            if context.account_id:
                lines.append(
                    f"- User Account: {context.account_id} (payer and default account)"
                )
                lines.append(
                    f"- When no account is specified, {context.account_id} will be used"
                )
            else:
                lines.append(
                    "- User Account: Not specified (transactions cannot be prepared)"
                )
        else:
            lines.append("- Mode: Autonomous (agent signs and submits transactions)")
            if context.account_id:
                lines.append(f"- User Account: {context.account_id}")
                lines.append(
                    f"- When no account is specified, {context.account_id} will be used"
                )
            else:
                lines.append(
                    "- When no account is specified, the operator account will be used"
                )

        return "\n".join(lines)

    @staticmethod
    def get_any_address_parameter_description(
        param_name: str, context: Context, is_required: bool = False
    ) -> str:
        """
        Description for a parameter accepting a Hedera id or an EVM address.
        """
        if is_required:
            return f"{param_name} (str, required): The account address. This can be the EVM address or the Hedera account id"

        default_desc = AccountResolver.get_default_account_description(context)
        return f"{param_name} (str, optional): The Hedera account ID or EVM address. If not provided, defaults to the {default_desc}"

    @staticmethod
    def get_account_parameter_description(
        param_name: str, context: Context, is_required: bool = False
    ) -> str:
        if is_required:
            return f"{param_name} (str, required): The Hedera account ID"

        default_desc = AccountResolver.get_default_account_description(context)
        return f"{param_name} (str, optional): The Hedera account ID. If not provided, defaults to the {default_desc}"

    @staticmethod
    def get_parameter_usage_instructions() -> str:
        return """
Important:
- Only include optional parameters if explicitly provided by the user
- Do not generate placeholder values for optional fields
- Leave optional parameters undefined if not specified by the user
- Amounts are given in display units (e.g. 1.5 HBAR, 10 tokens); never convert them to base units yourself
- If the user mentions multiple recipients or amounts and the tool accepts an array, combine them into a single array and make exactly one call to that tool.
"""
