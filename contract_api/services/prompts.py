generate_contract = """This is a description for a new smart contract: {description}.
This is a template for a smart contract from MultiversX blockchain: {template}.
Use them to generate a new smart contract in {language}.
Provide only the {language} code."""


def build_prompt(description: str, template: str, language: str) -> str:
    return generate_contract.format(
        description=description, template=template, language=language
    )
