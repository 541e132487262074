from simdverify.core import LineKind, LineTokenizer, classify_line, tokenize_line


def test_instruction_with_memory_operand_and_comment():
    tokens = tokenize_line('    movdqa xmm0, [src]   ; load the row', ';')
    assert tokens == ['movdqa', 'xmm0', ',', '[', 'src', ']']


def test_blank_and_comment_only_lines_are_empty():
    assert tokenize_line('', ';') == []
    assert tokenize_line('   \t  \n', ';') == []
    assert tokenize_line('  ; nothing but a comment', ';') == []


def test_punctuation_is_split_per_character():
    assert tokenize_line('],[', ';') == [']', ',', '[']
    assert tokenize_line('{d0-d3}', '@') == ['{', 'd0', '-', 'd3', '}']


def test_word_runs_stay_whole():
    assert tokenize_line('pinsrq xmm1, r11, 0x1F', ';') == ['pinsrq', 'xmm1', ',', 'r11', ',', '0x1F']
    assert tokenize_line('loop_end_stride 16', ';') == ['loop_end_stride', '16']


def test_directive_and_label_lines():
    assert tokenize_line('%macro prolog 0', ';') == ['%', 'macro', 'prolog', '0']
    assert tokenize_line('predict_paeth:', ';') == ['predict_paeth', ':']


def test_data_type_suffix():
    assert tokenize_line('vadd.i16 q0, q1, q2', '@') == ['vadd', '.', 'i16', 'q0', ',', 'q1', ',', 'q2']


def test_comment_sigil_is_per_profile():
    tokenizer = LineTokenizer('@')
    assert tokenizer.tokenize('vmov d0, d1 @ copy ; not a comment here') == ['vmov', 'd0', ',', 'd1']
    assert tokenizer.tokenize('mov xmm0 ; x86 comment') == ['mov', 'xmm0', ';', 'x86', 'comment']


def test_classify_line():
    assert classify_line([], '%') is LineKind.EMPTY
    assert classify_line(['%', 'macro', 'prolog', '0'], '%') is LineKind.DIRECTIVE
    assert classify_line(['start', ':'], '%') is LineKind.LABEL
    assert classify_line(['start', ':', 'mov'], '%') is LineKind.LABEL
    assert classify_line(['mov', 'xmm0'], '%') is LineKind.INSTRUCTION
    assert classify_line(['epilog'], '%') is LineKind.INSTRUCTION
