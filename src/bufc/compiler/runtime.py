"""
Buffer Machine Runtime
======================

C source for the runtime every generated program starts with.

Machine Model
-------------
A fixed array of MAX_BUFFER_SIZE int cells, all zero, and a pointer at 0.
``execute()`` interprets a raw operation string one character at a time:

| Char | Effect                                              |
|------|-----------------------------------------------------|
| >    | move pointer right                                  |
| <    | move pointer left                                   |
| +    | increment current cell                              |
| -    | decrement current cell                              |
| .    | print cells 0..pointer as chr(cell + 64), newline   |
| ,    | zero every cell and move pointer to 0               |

Other characters are ignored. Pointer bounds are not checked.
"""

MAX_BUFFER_SIZE = 512

# Added to a cell value before printing it as a character: 1 -> 'A'
CHAR_OFFSET = 64

OPERATION_CHARS = "><+-.,"

RUNTIME_PREAMBLE = f"""\
#include <stdio.h>
#include <string.h>
#include <stdlib.h>

#define MAX_BUFFER_SIZE {MAX_BUFFER_SIZE}
#define CHAR_OFFSET {CHAR_OFFSET}

typedef struct buffer
{{
    int buffer[MAX_BUFFER_SIZE];
    int pointer;
}} buffer_t;

typedef char *string_t;

buffer_t make_buffer()
{{
    buffer_t buffer;

    for (int i = 0; i < MAX_BUFFER_SIZE; i++)
    {{
        buffer.buffer[i] = 0;
    }}

    buffer.pointer = 0;
    return buffer;
}}

void clear_buffer(buffer_t *buffer)
{{
    buffer->pointer = 0;

    for (int i = 0; i < MAX_BUFFER_SIZE; i++)
    {{
        buffer->buffer[i] = 0;
    }}
}}

void write(buffer_t *buffer)
{{
    for (int i = 0; i < buffer->pointer + 1; i++)
    {{
        printf("%c", buffer->buffer[i] + CHAR_OFFSET);
    }}

    printf("\\n");
}}

void execute(buffer_t *buffer, string_t instructions)
{{
    int instructions_length = strlen(instructions);

    for (int i = 0; i < instructions_length; i++)
    {{
        switch (instructions[i])
        {{
        case '>':
            buffer->pointer++;
            break;
        case '<':
            buffer->pointer--;
            break;
        case '+':
            buffer->buffer[buffer->pointer]++;
            break;
        case '-':
            buffer->buffer[buffer->pointer]--;
            break;
        case '.':
            write(buffer);
            break;
        case ',':
            clear_buffer(buffer);
            /* fall through */
        default:
            break;
        }}
    }}
}}
"""
