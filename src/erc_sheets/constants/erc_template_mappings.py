"""Cell mappings for the ERC worksheet template.

Each section maps to an ordered list of rows:
(cell, mapping type, data type, field name[, description]).
"""

SHEET_NAME = "Understandable Data-final"

ERC_TEMPLATE_MAPPINGS = {
    "filerRemarks": [
        ("A1", "HEADER", "TEXT", "filerRemarksHeader"),
        ("A2", "DATA_VALUE", "TEXT", "filerRemarks", "Company remarks and notes"),
    ],
    "employeeInfo": [
        ("K7", "TEMPLATE_LABEL", "TEXT", "fullTimeW2Label"),
        ("K8", "DATA_VALUE", "NUMBER", "fullTimeW2Count2020", "2020 full-time W2 employees"),
        ("L8", "DATA_VALUE", "NUMBER", "fullTimeW2Count2021", "2021 full-time W2 employees"),
        ("K20", "TEMPLATE_LABEL", "TEXT", "employeeInfoHeader"),
        ("K21", "TEMPLATE_LABEL", "TEXT", "fullTimeEmployeesLabel"),
    ],
    "qualifyingQuestions": [
        # Headers
        ("A8", "TEMPLATE_LABEL", "TEXT", "qualifyingQuestionsHeader"),
        ("B8", "HEADER", "TEXT", "q1_2020"),
        ("C8", "HEADER", "TEXT", "q2_2020"),
        ("D8", "HEADER", "TEXT", "q3_2020"),
        ("E8", "HEADER", "TEXT", "q4_2020"),
        ("F8", "HEADER", "TEXT", "q1_2021"),
        ("G8", "HEADER", "TEXT", "q2_2021"),
        ("H8", "HEADER", "TEXT", "q3_2021"),

        # Government shutdowns - Row 9
        ("A9", "TEMPLATE_LABEL", "TEXT", "governmentShutdownQuestion"),
        ("B9", "DATA_VALUE", "BOOLEAN", "shutdown_q1_2020"),
        ("C9", "DATA_VALUE", "BOOLEAN", "shutdown_q2_2020"),
        ("D9", "DATA_VALUE", "BOOLEAN", "shutdown_q3_2020"),
        ("E9", "DATA_VALUE", "BOOLEAN", "shutdown_q4_2020"),
        ("F9", "DATA_VALUE", "BOOLEAN", "shutdown_q1_2021"),
        ("G9", "DATA_VALUE", "BOOLEAN", "shutdown_q2_2021"),
        ("H9", "DATA_VALUE", "BOOLEAN", "shutdown_q3_2021"),

        # Supply disruptions - Row 10
        ("A10", "TEMPLATE_LABEL", "TEXT", "supplyDisruptionQuestion"),
        ("B10", "DATA_VALUE", "BOOLEAN", "supply_q1_2020"),
        ("C10", "DATA_VALUE", "BOOLEAN", "supply_q2_2020"),
        ("D10", "DATA_VALUE", "BOOLEAN", "supply_q3_2020"),
        ("E10", "DATA_VALUE", "BOOLEAN", "supply_q4_2020"),
        ("F10", "DATA_VALUE", "BOOLEAN", "supply_q1_2021"),
        ("G10", "DATA_VALUE", "BOOLEAN", "supply_q2_2021"),
        ("H10", "DATA_VALUE", "BOOLEAN", "supply_q3_2021"),

        # 10% reduction - Row 11
        ("A11", "TEMPLATE_LABEL", "TEXT", "reduction10Question"),
        ("B11", "DATA_VALUE", "BOOLEAN", "reduction10_q1_2020"),
        ("C11", "DATA_VALUE", "BOOLEAN", "reduction10_q2_2020"),
        ("D11", "DATA_VALUE", "BOOLEAN", "reduction10_q3_2020"),
        ("E11", "DATA_VALUE", "BOOLEAN", "reduction10_q4_2020"),
        ("F11", "DATA_VALUE", "BOOLEAN", "reduction10_q1_2021"),
        ("G11", "DATA_VALUE", "BOOLEAN", "reduction10_q2_2021"),
        ("H11", "DATA_VALUE", "BOOLEAN", "reduction10_q3_2021"),

        # 20% reduction - Row 12
        ("A12", "TEMPLATE_LABEL", "TEXT", "reduction20Question"),
        ("B12", "DATA_VALUE", "BOOLEAN", "reduction20_q1_2020"),
        ("C12", "DATA_VALUE", "BOOLEAN", "reduction20_q2_2020"),
        ("D12", "DATA_VALUE", "BOOLEAN", "reduction20_q3_2020"),
        ("E12", "DATA_VALUE", "BOOLEAN", "reduction20_q4_2020"),
        ("F12", "DATA_VALUE", "BOOLEAN", "reduction20_q1_2021"),
        ("G12", "DATA_VALUE", "BOOLEAN", "reduction20_q2_2021"),
        ("H12", "DATA_VALUE", "BOOLEAN", "reduction20_q3_2021"),

        # Recovery startup - Row 13
        ("A13", "TEMPLATE_LABEL", "TEXT", "recoveryStartupQuestion"),
        ("B13", "DATA_VALUE", "BOOLEAN", "recovery_q1_2020"),
        ("C13", "DATA_VALUE", "BOOLEAN", "recovery_q2_2020"),
        ("D13", "DATA_VALUE", "BOOLEAN", "recovery_q3_2020"),
        ("E13", "DATA_VALUE", "BOOLEAN", "recovery_q4_2020"),
        ("F13", "DATA_VALUE", "BOOLEAN", "recovery_q1_2021"),
        ("G13", "DATA_VALUE", "BOOLEAN", "recovery_q2_2021"),
        ("H13", "DATA_VALUE", "BOOLEAN", "recovery_q3_2021"),

        # Severely distressed - Row 14
        ("A14", "TEMPLATE_LABEL", "TEXT", "severelyDistressedQuestion"),
        ("B14", "DATA_VALUE", "BOOLEAN", "distressed_q1_2020"),
        ("C14", "DATA_VALUE", "BOOLEAN", "distressed_q2_2020"),
        ("D14", "DATA_VALUE", "BOOLEAN", "distressed_q3_2020"),
        ("E14", "DATA_VALUE", "BOOLEAN", "distressed_q4_2020"),
        ("F14", "DATA_VALUE", "BOOLEAN", "distressed_q1_2021"),
        ("G14", "DATA_VALUE", "BOOLEAN", "distressed_q2_2021"),
        ("H14", "DATA_VALUE", "BOOLEAN", "distressed_q3_2021"),
    ],
    "grossIncome": [
        ("K25", "TEMPLATE_LABEL", "TEXT", "grossIncomeHeader"),
        ("K26", "TEMPLATE_LABEL", "TEXT", "grossReceipts2019Question"),
        ("K27", "TEMPLATE_LABEL", "TEXT", "quarterlyDeclineQuestion"),

        # 2019 Gross Receipts
        ("K30", "TEMPLATE_LABEL", "TEXT", "gross_2019_label"),
        ("A31", "TEMPLATE_LABEL", "TEXT", "gross_2019_q1_label"),
        ("B31", "DATA_VALUE", "NUMBER", "gross_2019_q1"),
        ("A32", "TEMPLATE_LABEL", "TEXT", "gross_2019_q2_label"),
        ("B32", "DATA_VALUE", "NUMBER", "gross_2019_q2"),
        ("A33", "TEMPLATE_LABEL", "TEXT", "gross_2019_q3_label"),
        ("B33", "DATA_VALUE", "NUMBER", "gross_2019_q3"),
        ("A34", "TEMPLATE_LABEL", "TEXT", "gross_2019_q4_label"),
        ("B34", "DATA_VALUE", "NUMBER", "gross_2019_q4"),

        # 2020 Gross Receipts
        ("K37", "TEMPLATE_LABEL", "TEXT", "gross_2020_label"),
        ("A38", "TEMPLATE_LABEL", "TEXT", "gross_2020_q1_label"),
        ("B38", "DATA_VALUE", "NUMBER", "gross_2020_q1"),
        ("A39", "TEMPLATE_LABEL", "TEXT", "gross_2020_q2_label"),
        ("B39", "DATA_VALUE", "NUMBER", "gross_2020_q2"),
        ("A40", "TEMPLATE_LABEL", "TEXT", "gross_2020_q3_label"),
        ("B40", "DATA_VALUE", "NUMBER", "gross_2020_q3"),
        ("A41", "TEMPLATE_LABEL", "TEXT", "gross_2020_q4_label"),
        ("B41", "DATA_VALUE", "NUMBER", "gross_2020_q4"),

        # 2021 Gross Receipts
        ("K44", "TEMPLATE_LABEL", "TEXT", "gross_2021_label"),
        ("A45", "TEMPLATE_LABEL", "TEXT", "gross_2021_q1_label"),
        ("B45", "DATA_VALUE", "NUMBER", "gross_2021_q1"),
        ("A46", "TEMPLATE_LABEL", "TEXT", "gross_2021_q2_label"),
        ("B46", "DATA_VALUE", "NUMBER", "gross_2021_q2"),
        ("A47", "TEMPLATE_LABEL", "TEXT", "gross_2021_q3_label"),
        ("B47", "DATA_VALUE", "NUMBER", "gross_2021_q3"),
        ("A48", "TEMPLATE_LABEL", "TEXT", "gross_2021_q4_label"),
        ("B48", "DATA_VALUE", "NUMBER", "gross_2021_q4"),
    ],
    "form941": [
        ("K52", "TEMPLATE_LABEL", "TEXT", "form941Header"),
        ("K57", "DATA_VALUE", "TEXT", "ercAmountClaimedLabel", "ERC amount claimed on the filed 941-X"),
        ("K58", "DATA_VALUE", "TEXT", "dateFiledLabel", "Date the 941-X was filed"),

        # 2020 Form 941 Headers
        ("A61", "TEMPLATE_LABEL", "TEXT", "form941_2020_label"),
        ("B62", "TEMPLATE_LABEL", "TEXT", "numEmployeesDesc"),
        ("C62", "TEMPLATE_LABEL", "TEXT", "totalWagesDesc"),
        ("D62", "TEMPLATE_LABEL", "TEXT", "fedTaxWithheldDesc"),
        ("E62", "TEMPLATE_LABEL", "TEXT", "qualifiedSickWagesDesc"),
        ("F62", "TEMPLATE_LABEL", "TEXT", "qualifiedFamilyLeaveDesc"),
        ("G62", "TEMPLATE_LABEL", "TEXT", "retentionCreditWagesDesc"),
        ("H62", "TEMPLATE_LABEL", "TEXT", "healthPlanExpensesDesc"),
        ("I62", "TEMPLATE_LABEL", "TEXT", "form5884CreditDesc"),

        # 2020 Q1 Data
        ("A63", "TEMPLATE_LABEL", "TEXT", "form941_2020_q1_label"),
        ("B63", "DATA_VALUE", "NUMBER", "form941_2020_q1_employees"),
        ("C63", "DATA_VALUE", "NUMBER", "form941_2020_q1_wages"),
        ("D63", "DATA_VALUE", "NUMBER", "form941_2020_q1_fedTax"),
        ("E63", "DATA_VALUE", "NUMBER", "form941_2020_q1_sickWages"),
        ("F63", "DATA_VALUE", "NUMBER", "form941_2020_q1_familyLeave"),
        ("G63", "DATA_VALUE", "NUMBER", "form941_2020_q1_retentionWages"),
        ("H63", "DATA_VALUE", "NUMBER", "form941_2020_q1_healthExpenses"),
        ("I63", "DATA_VALUE", "NUMBER", "form941_2020_q1_form5884"),

        # 2020 Q2 Data
        ("A64", "TEMPLATE_LABEL", "TEXT", "form941_2020_q2_label"),
        ("B64", "DATA_VALUE", "NUMBER", "form941_2020_q2_employees"),
        ("C64", "DATA_VALUE", "NUMBER", "form941_2020_q2_wages"),
        ("D64", "DATA_VALUE", "NUMBER", "form941_2020_q2_fedTax"),
        ("E64", "DATA_VALUE", "NUMBER", "form941_2020_q2_sickWages"),
        ("F64", "DATA_VALUE", "NUMBER", "form941_2020_q2_familyLeave"),
        ("G64", "DATA_VALUE", "NUMBER", "form941_2020_q2_retentionWages"),
        ("H64", "DATA_VALUE", "NUMBER", "form941_2020_q2_healthExpenses"),
        ("I64", "DATA_VALUE", "NUMBER", "form941_2020_q2_form5884"),

        # 2020 Q3 Data
        ("A65", "TEMPLATE_LABEL", "TEXT", "form941_2020_q3_label"),
        ("B65", "DATA_VALUE", "NUMBER", "form941_2020_q3_employees"),
        ("C65", "DATA_VALUE", "NUMBER", "form941_2020_q3_wages"),
        ("D65", "DATA_VALUE", "NUMBER", "form941_2020_q3_fedTax"),
        ("E65", "DATA_VALUE", "NUMBER", "form941_2020_q3_sickWages"),
        ("F65", "DATA_VALUE", "NUMBER", "form941_2020_q3_familyLeave"),
        ("G65", "DATA_VALUE", "NUMBER", "form941_2020_q3_retentionWages"),
        ("H65", "DATA_VALUE", "NUMBER", "form941_2020_q3_healthExpenses"),
        ("I65", "DATA_VALUE", "NUMBER", "form941_2020_q3_form5884"),

        # 2020 Q4 Data
        ("A66", "TEMPLATE_LABEL", "TEXT", "form941_2020_q4_label"),
        ("B66", "DATA_VALUE", "NUMBER", "form941_2020_q4_employees"),
        ("C66", "DATA_VALUE", "NUMBER", "form941_2020_q4_wages"),
        ("D66", "DATA_VALUE", "NUMBER", "form941_2020_q4_fedTax"),
        ("E66", "DATA_VALUE", "NUMBER", "form941_2020_q4_sickWages"),
        ("F66", "DATA_VALUE", "NUMBER", "form941_2020_q4_familyLeave"),
        ("G66", "DATA_VALUE", "NUMBER", "form941_2020_q4_retentionWages"),
        ("H66", "DATA_VALUE", "NUMBER", "form941_2020_q4_healthExpenses"),
        ("I66", "DATA_VALUE", "NUMBER", "form941_2020_q4_form5884"),

        # 2021 Form 941 Data
        ("A69", "TEMPLATE_LABEL", "TEXT", "form941_2021_label"),

        # 2021 Q1 Data
        ("A71", "TEMPLATE_LABEL", "TEXT", "form941_2021_q1_label"),
        ("B71", "DATA_VALUE", "NUMBER", "form941_2021_q1_employees"),
        ("C71", "DATA_VALUE", "NUMBER", "form941_2021_q1_wages"),
        ("D71", "DATA_VALUE", "NUMBER", "form941_2021_q1_fedTax"),
        ("E71", "DATA_VALUE", "NUMBER", "form941_2021_q1_sickWages"),
        ("F71", "DATA_VALUE", "NUMBER", "form941_2021_q1_familyLeave"),
        ("G71", "DATA_VALUE", "NUMBER", "form941_2021_q1_retentionWages"),
        ("H71", "DATA_VALUE", "NUMBER", "form941_2021_q1_healthExpenses"),
        ("I71", "DATA_VALUE", "NUMBER", "form941_2021_q1_form5884"),

        # 2021 Q2 Data
        ("A72", "TEMPLATE_LABEL", "TEXT", "form941_2021_q2_label"),
        ("B72", "DATA_VALUE", "NUMBER", "form941_2021_q2_employees"),
        ("C72", "DATA_VALUE", "NUMBER", "form941_2021_q2_wages"),
        ("D72", "DATA_VALUE", "NUMBER", "form941_2021_q2_fedTax"),
        ("E72", "DATA_VALUE", "NUMBER", "form941_2021_q2_sickWages"),
        ("F72", "DATA_VALUE", "NUMBER", "form941_2021_q2_familyLeave"),
        ("G72", "DATA_VALUE", "NUMBER", "form941_2021_q2_retentionWages"),
        ("H72", "DATA_VALUE", "NUMBER", "form941_2021_q2_healthExpenses"),
        ("I72", "DATA_VALUE", "NUMBER", "form941_2021_q2_form5884"),

        # 2021 Q3 Data
        ("A73", "TEMPLATE_LABEL", "TEXT", "form941_2021_q3_label"),
        ("B73", "DATA_VALUE", "NUMBER", "form941_2021_q3_employees"),
        ("C73", "DATA_VALUE", "NUMBER", "form941_2021_q3_wages"),
        ("D73", "DATA_VALUE", "NUMBER", "form941_2021_q3_fedTax"),
        ("E73", "DATA_VALUE", "NUMBER", "form941_2021_q3_sickWages"),
        ("F73", "DATA_VALUE", "NUMBER", "form941_2021_q3_familyLeave"),
        ("G73", "DATA_VALUE", "NUMBER", "form941_2021_q3_retentionWages"),
        ("H73", "DATA_VALUE", "NUMBER", "form941_2021_q3_healthExpenses"),
        ("I73", "DATA_VALUE", "NUMBER", "form941_2021_q3_form5884"),

        # 2021 Q4 Data
        ("A74", "TEMPLATE_LABEL", "TEXT", "form941_2021_q4_label"),
        ("B74", "DATA_VALUE", "NUMBER", "form941_2021_q4_employees"),
        ("C74", "DATA_VALUE", "NUMBER", "form941_2021_q4_wages"),
        ("D74", "DATA_VALUE", "NUMBER", "form941_2021_q4_fedTax"),
        ("E74", "DATA_VALUE", "NUMBER", "form941_2021_q4_sickWages"),
        ("F74", "DATA_VALUE", "NUMBER", "form941_2021_q4_familyLeave"),
        ("G74", "DATA_VALUE", "NUMBER", "form941_2021_q4_retentionWages"),
        ("H74", "DATA_VALUE", "NUMBER", "form941_2021_q4_healthExpenses"),
        ("I74", "DATA_VALUE", "NUMBER", "form941_2021_q4_form5884"),
    ],
    "form940": [
        ("K77", "TEMPLATE_LABEL", "TEXT", "form940Header"),

        # 2020 Form 940
        ("A82", "TEMPLATE_LABEL", "TEXT", "form940_2020_label"),
        ("C82", "TEMPLATE_LABEL", "TEXT", "columnALabel"),
        ("D82", "TEMPLATE_LABEL", "TEXT", "columnBLabel"),
        ("B83", "TEMPLATE_LABEL", "TEXT", "lineLabel"),
        ("C83", "TEMPLATE_LABEL", "TEXT", "descriptionLabel"),
        ("D83", "TEMPLATE_LABEL", "TEXT", "amountLabel"),

        # Line 3 - Total payments
        ("B84", "TEMPLATE_LABEL", "TEXT", "form940_2020_line3_label"),
        ("C84", "TEMPLATE_LABEL", "TEXT", "form940_2020_totalPayments_desc"),
        ("D84", "DATA_VALUE", "NUMBER", "form940_2020_totalPayments"),

        # Line 4 - Exempt payments
        ("B85", "TEMPLATE_LABEL", "TEXT", "form940_2020_line4_label"),
        ("C85", "TEMPLATE_LABEL", "TEXT", "form940_2020_exemptPayments_desc"),
        ("D85", "DATA_VALUE", "NUMBER", "form940_2020_exemptPayments"),

        # Line 4 subcategories
        ("B87", "TEMPLATE_LABEL", "TEXT", "form940_2020_line4b_label"),
        ("C87", "TEMPLATE_LABEL", "TEXT", "form940_2020_retirementPension_desc"),
        ("D87", "DATA_VALUE", "NUMBER", "form940_2020_retirement"),

        ("B88", "TEMPLATE_LABEL", "TEXT", "form940_2020_line4c_label"),
        ("C88", "TEMPLATE_LABEL", "TEXT", "form940_2020_groupLifeInsurance_desc"),
        ("D88", "DATA_VALUE", "NUMBER", "form940_2020_groupLife"),

        ("B89", "TEMPLATE_LABEL", "TEXT", "form940_2020_line4d_label"),
        ("C89", "TEMPLATE_LABEL", "TEXT", "form940_2020_dependentCare_desc"),
        ("D89", "DATA_VALUE", "NUMBER", "form940_2020_dependentCare"),

        ("B90", "TEMPLATE_LABEL", "TEXT", "form940_2020_line4e_label"),
        ("C90", "TEMPLATE_LABEL", "TEXT", "form940_2020_other_desc"),
        ("D90", "DATA_VALUE", "NUMBER", "form940_2020_other"),

        # Line 5 - Excess payments
        ("B91", "TEMPLATE_LABEL", "TEXT", "form940_2020_line5_label"),
        ("C91", "TEMPLATE_LABEL", "TEXT", "form940_2020_excessPayments_desc"),
        ("D91", "DATA_VALUE", "NUMBER", "form940_2020_excessPayments"),

        # Line 6 - Subtotal
        ("B92", "TEMPLATE_LABEL", "TEXT", "form940_2020_line6_label"),
        ("C92", "TEMPLATE_LABEL", "TEXT", "form940_2020_subtotal_desc"),
        ("D92", "DATA_VALUE", "NUMBER", "form940_2020_subtotal"),

        # Line 7 - Taxable FUTA wages
        ("B93", "TEMPLATE_LABEL", "TEXT", "form940_2020_line7_label"),
        ("C93", "TEMPLATE_LABEL", "TEXT", "form940_2020_taxableFutaWages_desc"),
        ("D93", "DATA_VALUE", "NUMBER", "form940_2020_taxableFutaWages"),

        # Line 8 - FUTA tax
        ("B94", "TEMPLATE_LABEL", "TEXT", "form940_2020_line8_label"),
        ("C94", "TEMPLATE_LABEL", "TEXT", "form940_2020_futaTax_desc"),
        ("D94", "DATA_VALUE", "NUMBER", "form940_2020_futaTax"),

        # 2021 Form 940
        ("A96", "TEMPLATE_LABEL", "TEXT", "form940_2021_label"),

        # Line 3 - Total payments
        ("B98", "TEMPLATE_LABEL", "TEXT", "form940_2021_line3_label"),
        ("C98", "TEMPLATE_LABEL", "TEXT", "form940_2021_totalPayments_desc"),
        ("D98", "DATA_VALUE", "NUMBER", "form940_2021_totalPayments"),

        # Line 4 - Exempt payments
        ("B99", "TEMPLATE_LABEL", "TEXT", "form940_2021_line4_label"),
        ("C99", "TEMPLATE_LABEL", "TEXT", "form940_2021_exemptPayments_desc"),
        ("D99", "DATA_VALUE", "NUMBER", "form940_2021_exemptPayments"),

        # Line 4 subcategories
        ("B101", "TEMPLATE_LABEL", "TEXT", "form940_2021_line4b_label"),
        ("C101", "TEMPLATE_LABEL", "TEXT", "form940_2021_retirementPension_desc"),
        ("D101", "DATA_VALUE", "NUMBER", "form940_2021_retirement"),

        ("B102", "TEMPLATE_LABEL", "TEXT", "form940_2021_line4c_label"),
        ("C102", "TEMPLATE_LABEL", "TEXT", "form940_2021_groupLifeInsurance_desc"),
        ("D102", "DATA_VALUE", "NUMBER", "form940_2021_groupLife"),

        ("B103", "TEMPLATE_LABEL", "TEXT", "form940_2021_line4d_label"),
        ("C103", "TEMPLATE_LABEL", "TEXT", "form940_2021_dependentCare_desc"),
        ("D103", "DATA_VALUE", "NUMBER", "form940_2021_dependentCare"),

        ("B104", "TEMPLATE_LABEL", "TEXT", "form940_2021_line4e_label"),
        ("C104", "TEMPLATE_LABEL", "TEXT", "form940_2021_other_desc"),
        ("D104", "DATA_VALUE", "NUMBER", "form940_2021_other"),

        # Line 5 - Excess payments
        ("B105", "TEMPLATE_LABEL", "TEXT", "form940_2021_line5_label"),
        ("C105", "TEMPLATE_LABEL", "TEXT", "form940_2021_excessPayments_desc"),
        ("D105", "DATA_VALUE", "NUMBER", "form940_2021_excessPayments"),

        # Line 6 - Subtotal
        ("B106", "TEMPLATE_LABEL", "TEXT", "form940_2021_line6_label"),
        ("C106", "TEMPLATE_LABEL", "TEXT", "form940_2021_subtotal_desc"),
        ("D106", "DATA_VALUE", "NUMBER", "form940_2021_subtotal"),

        # Line 7 - Taxable FUTA wages
        ("B107", "TEMPLATE_LABEL", "TEXT", "form940_2021_line7_label"),
        ("C107", "TEMPLATE_LABEL", "TEXT", "form940_2021_taxableFutaWages_desc"),
        ("D107", "DATA_VALUE", "NUMBER", "form940_2021_taxableFutaWages"),

        # Line 8 - FUTA tax
        ("B108", "TEMPLATE_LABEL", "TEXT", "form940_2021_line8_label"),
        ("C108", "TEMPLATE_LABEL", "TEXT", "form940_2021_futaTax_desc"),
        ("D108", "DATA_VALUE", "NUMBER", "form940_2021_futaTax"),
    ],
    "statePayrollTaxes": [
        ("K111", "TEMPLATE_LABEL", "TEXT", "statePayrollTaxesHeader"),

        # 2020 State Payroll Taxes
        ("K116", "TEMPLATE_LABEL", "TEXT", "state_2020_label"),
        ("A117", "TEMPLATE_LABEL", "TEXT", "quarterLabel"),
        ("B117", "TEMPLATE_LABEL", "TEXT", "caSuiTaxableWagesLabel"),
        ("C117", "TEMPLATE_LABEL", "TEXT", "caSuiTaxRateLabel"),
        ("D117", "TEMPLATE_LABEL", "TEXT", "caSuiTaxAmountLabel"),
        ("E117", "TEMPLATE_LABEL", "TEXT", "caSdiTaxableWagesLabel"),
        ("F117", "TEMPLATE_LABEL", "TEXT", "caSdiTaxAmountLabel"),

        # 2020 Q1
        ("A118", "TEMPLATE_LABEL", "TEXT", "state_2020_q1_label"),
        ("B118", "DATA_VALUE", "NUMBER", "state_2020_q1_suiWages"),
        ("C118", "DATA_VALUE", "PERCENTAGE", "state_2020_q1_suiRate"),
        ("D118", "DATA_VALUE", "NUMBER", "state_2020_q1_suiTax"),
        ("E118", "DATA_VALUE", "NUMBER", "state_2020_q1_sdiWages"),
        ("F118", "DATA_VALUE", "NUMBER", "state_2020_q1_sdiTax"),

        # 2020 Q2
        ("A119", "TEMPLATE_LABEL", "TEXT", "state_2020_q2_label"),
        ("B119", "DATA_VALUE", "NUMBER", "state_2020_q2_suiWages"),
        ("C119", "DATA_VALUE", "PERCENTAGE", "state_2020_q2_suiRate"),
        ("D119", "DATA_VALUE", "NUMBER", "state_2020_q2_suiTax"),
        ("E119", "DATA_VALUE", "NUMBER", "state_2020_q2_sdiWages"),
        ("F119", "DATA_VALUE", "NUMBER", "state_2020_q2_sdiTax"),

        # 2020 Q3
        ("A120", "TEMPLATE_LABEL", "TEXT", "state_2020_q3_label"),
        ("B120", "DATA_VALUE", "NUMBER", "state_2020_q3_suiWages"),
        ("C120", "DATA_VALUE", "PERCENTAGE", "state_2020_q3_suiRate"),
        ("D120", "DATA_VALUE", "NUMBER", "state_2020_q3_suiTax"),
        ("E120", "DATA_VALUE", "NUMBER", "state_2020_q3_sdiWages"),
        ("F120", "DATA_VALUE", "NUMBER", "state_2020_q3_sdiTax"),

        # 2020 Q4
        ("A121", "TEMPLATE_LABEL", "TEXT", "state_2020_q4_label"),
        ("B121", "DATA_VALUE", "NUMBER", "state_2020_q4_suiWages"),
        ("C121", "DATA_VALUE", "PERCENTAGE", "state_2020_q4_suiRate"),
        ("D121", "DATA_VALUE", "NUMBER", "state_2020_q4_suiTax"),
        ("E121", "DATA_VALUE", "NUMBER", "state_2020_q4_sdiWages"),
        ("F121", "DATA_VALUE", "NUMBER", "state_2020_q4_sdiTax"),

        # 2021 State Payroll Taxes
        ("K124", "TEMPLATE_LABEL", "TEXT", "state_2021_label"),

        # 2021 Q1
        ("A126", "TEMPLATE_LABEL", "TEXT", "state_2021_q1_label"),
        ("B126", "DATA_VALUE", "NUMBER", "state_2021_q1_suiWages"),
        ("C126", "DATA_VALUE", "PERCENTAGE", "state_2021_q1_suiRate"),
        ("D126", "DATA_VALUE", "NUMBER", "state_2021_q1_suiTax"),
        ("E126", "DATA_VALUE", "NUMBER", "state_2021_q1_sdiWages"),
        ("F126", "DATA_VALUE", "NUMBER", "state_2021_q1_sdiTax"),

        # 2021 Q2
        ("A127", "TEMPLATE_LABEL", "TEXT", "state_2021_q2_label"),
        ("B127", "DATA_VALUE", "NUMBER", "state_2021_q2_suiWages"),
        ("C127", "DATA_VALUE", "PERCENTAGE", "state_2021_q2_suiRate"),
        ("D127", "DATA_VALUE", "NUMBER", "state_2021_q2_suiTax"),
        ("E127", "DATA_VALUE", "NUMBER", "state_2021_q2_sdiWages"),
        ("F127", "DATA_VALUE", "NUMBER", "state_2021_q2_sdiTax"),

        # 2021 Q3
        ("A128", "TEMPLATE_LABEL", "TEXT", "state_2021_q3_label"),
        ("B128", "DATA_VALUE", "NUMBER", "state_2021_q3_suiWages"),
        ("C128", "DATA_VALUE", "PERCENTAGE", "state_2021_q3_suiRate"),
        ("D128", "DATA_VALUE", "NUMBER", "state_2021_q3_suiTax"),
        ("E128", "DATA_VALUE", "NUMBER", "state_2021_q3_sdiWages"),
        ("F128", "DATA_VALUE", "NUMBER", "state_2021_q3_sdiTax"),

        # 2021 Q4
        ("A129", "TEMPLATE_LABEL", "TEXT", "state_2021_q4_label"),
        ("B129", "DATA_VALUE", "NUMBER", "state_2021_q4_suiWages"),
        ("C129", "DATA_VALUE", "PERCENTAGE", "state_2021_q4_suiRate"),
        ("D129", "DATA_VALUE", "NUMBER", "state_2021_q4_suiTax"),
        ("E129", "DATA_VALUE", "NUMBER", "state_2021_q4_sdiWages"),
        ("F129", "DATA_VALUE", "NUMBER", "state_2021_q4_sdiTax"),
    ],
}
